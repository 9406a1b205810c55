import pytest
from absurdle.engine import (
    Mark, evaluate, render, parse, is_solved, prune_dictionary, validate_guess,
    InvalidConfiguration, InvalidGuess,
)

E, P, A = Mark.EXACT, Mark.PARTIAL, Mark.ABSENT


def test_duplicate_letters_consumed_by_exact_first():
    assert evaluate("ABCDE", "AABBC") == (E, A, P, A, P)
    assert evaluate("ELITE", "EERIE") == (E, A, A, P, E)


# --- N=5 golden tests (duplicates + placements), (candidate, guess) ---
@pytest.mark.parametrize("candidate,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
])
def test_evaluate_n5_golden(candidate, guess, expected):
    assert render(evaluate(candidate, guess), "plain") == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("candidate,guess,expected", [
    ("letter", "settle", "-GGGYY"),
    ("letter", "little", "G-GG-Y"),
    ("palate", "planet", "GYY-YY"),
    ("tinket", "kitten", "YGYYGY"),
])
def test_evaluate_n6_samples(candidate, guess, expected):
    assert render(evaluate(candidate, guess), "plain") == expected


def test_evaluate_is_case_sensitive_per_character():
    assert evaluate("abc", "ABC") == (A, A, A)


def test_exact_match_is_solved():
    for w in ["a", "abet", "crane", "letter"]:
        assert is_solved(evaluate(w, w))


def test_evaluate_length_mismatch():
    with pytest.raises(InvalidGuess):
        evaluate("crane", "cranes")


def test_render_and_parse():
    patt = (E, P, A)
    assert render(patt) == "🟩🟨⬜"
    assert render(patt, "plain") == "GY-"
    assert parse("GY-") == patt
    assert parse("🟩🟨⬜", "emoji") == patt
    with pytest.raises(ValueError):
        parse("GX-")
    with pytest.raises(ValueError):
        render(patt, "morse")


def test_is_solved():
    assert is_solved((E, E, E))
    assert not is_solved((E, P, E))
    assert not is_solved(())


def test_prune_dictionary():
    assert prune_dictionary(["cat", "dog", "a"], 3) == {"cat", "dog"}
    assert prune_dictionary(["cat", "cat", "dog"], 3) == {"cat", "dog"}
    assert prune_dictionary(["cat", "dog"], 4) == set()


@pytest.mark.parametrize("length", [0, -1])
def test_prune_dictionary_rejects_bad_length(length):
    with pytest.raises(InvalidConfiguration):
        prune_dictionary(["cat"], length)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        prune_dictionary(["cat"], 0)


def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", 5, allowed) is True
    assert validate_guess(" zzzzz ", 5) is True
    assert validate_guess("zzzzz", 5, allowed) is False
    assert validate_guess("cranes", 5) is False
    assert validate_guess(None, 5) is False
