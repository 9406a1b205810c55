"""
Write the N-letter words of a dictionary to a new file.

Features:
- Reads whitespace-separated words, lowercased (same rules as the game).
- Keeps only words of exactly --length characters; duplicates collapse.
- Optional --alpha-only to also drop words with non a–z characters.
- Output is sorted alphabetically.

Usage:
    python -m script.prune_dictionary --in dictionary.txt --length 5 --out words_5.txt
"""

import argparse
from pathlib import Path

from absurdle.datasets import load_words, write_lines
from absurdle.engine import prune_dictionary


def main():
    ap = argparse.ArgumentParser(description="Keep only the words of one length.")
    ap.add_argument("--in", dest="inp", required=True, help="input dictionary file")
    ap.add_argument("--length", type=int, required=True, help="word length to keep")
    ap.add_argument("--out", dest="out", help="output file (default: <input stem>_<length>.txt)")
    ap.add_argument("--alpha-only", action="store_true", help="drop words with non a–z characters")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp.with_name(f"{inp.stem}_{args.length}.txt")

    words = load_words(inp)
    kept = prune_dictionary(words, args.length)
    if args.alpha_only:
        kept = {w for w in kept if w.isalpha()}

    write_lines(sorted(kept), outp)
    print(f"Input: {inp} ({len(words)} words) → Output: {outp} ({len(kept)} words of length {args.length})")


if __name__ == "__main__":
    main()
