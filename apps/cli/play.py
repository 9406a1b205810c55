# apps/cli/play.py
"""
Interactive Absurdle in the terminal.

The game asks for a dictionary file and a word length (unless given on the
command line), then reads guesses at a "> " prompt and answers each one with
a pattern. It never picks a word: every guess narrows the candidates to the
largest group of words that share a pattern. The game ends when a pattern
comes back all green, and prints "Absurdle <rounds>/∞" followed by every
pattern.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --dict dictionary.txt --length 5 --show-remaining
"""

from __future__ import annotations

import argparse
import logging
import sys

from absurdle.datasets import load_words
from absurdle.engine import InvalidConfiguration, InvalidGuess, render, validate_guess
from absurdle.engine.feedback import GLYPHS, DEFAULT_STYLE
from absurdle.harness import GameSession


def _ask(prompt: str) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.strip()


def _ask_length() -> int:
    while True:
        raw = _ask("What length word would you like to guess? ")
        try:
            return int(raw)
        except ValueError:
            print(f"Not a number: {raw!r}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="absurdle — the word game that never picks a word")
    ap.add_argument("--dict", dest="dictionary", help="dictionary file (whitespace-separated words)")
    ap.add_argument("--length", type=int, help="word length to play with")
    ap.add_argument("--glyphs", choices=sorted(GLYPHS), default=DEFAULT_STYLE,
                    help="how patterns are drawn")
    ap.add_argument("--show-remaining", action="store_true",
                    help="print how many words are still possible after each guess")
    ap.add_argument("--strict", action="store_true",
                    help="only accept guesses that are in the dictionary")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("Welcome to the game of Absurdle.")
    try:
        dictionary = args.dictionary or _ask("What dictionary would you like to use? ")
        length = args.length if args.length is not None else _ask_length()

        try:
            words = load_words(dictionary)
            session = GameSession.start(words, length)
        except (FileNotFoundError, InvalidConfiguration) as e:
            print(f"Cannot start game: {e}", file=sys.stderr)
            return 2

        allowed = set(words)
        while not session.solved:
            guess = _ask("> ")
            if args.strict and not validate_guess(guess, length, allowed):
                print(f"Not in the dictionary: {guess!r}")
                continue
            try:
                patt = session.guess(guess)
            except InvalidGuess as e:
                # The round is void; ask again.
                print(f"Invalid guess: {e}")
                continue
            print(": " + render(patt, args.glyphs))
            if args.show_remaining:
                print(f"({session.remaining} word(s) left)")
            print()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    print(session.summary(args.glyphs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
