import pytest
from absurdle.engine import (
    Mark, partition, bucket_sizes, select, parse, is_solved, InvalidGuess,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "alone", "adieu"]


@pytest.mark.parametrize("guess", ["raise", "scoop", "zzzzz", "eerie"])
def test_partition_covers_every_candidate_once(guess):
    groups = partition(guess, WORDS)
    members = [w for ws in groups.values() for w in ws]
    assert sorted(members) == sorted(WORDS)
    assert len(members) == len(set(members))
    assert list(groups) == sorted(groups)
    assert {p: len(ws) for p, ws in groups.items()} == bucket_sizes(guess, WORDS)


def test_select_keeps_largest_group_in_place():
    cands = {"aaa", "bbb", "ccc"}
    ref = cands
    patt = select("aaa", cands)
    assert patt == (Mark.ABSENT,) * 3
    assert cands is ref
    assert cands == {"bbb", "ccc"}


def test_select_uninformative_guess_keeps_everything():
    cands = {"aaa", "bbb", "ccc", "abc"}
    patt = select("xyz", cands)
    assert patt == parse("---")
    assert cands == {"aaa", "bbb", "ccc", "abc"}


def test_select_never_grows():
    cands = set(WORDS)
    for guess in ["raise", "clout", "stare", "crane"]:
        before = len(cands)
        select(guess, cands)
        assert 0 < len(cands) <= before


def test_select_is_deterministic():
    a, b = set(WORDS), set(WORDS)
    assert select("stare", a) == select("stare", b)
    assert a == b


def test_tie_goes_to_smallest_pattern_not_the_solution():
    # Every word lands in its own group; the tie-break must avoid "abet".
    cands = {"abet", "axer", "aide"}
    patt = select("abet", cands)
    assert not is_solved(patt)
    assert patt == parse("G-Y-")
    assert cands == {"aide"}


def test_select_empty_candidates():
    with pytest.raises(InvalidGuess):
        select("abc", set())


def test_select_wrong_length_leaves_candidates_alone():
    cands = {"cat", "dog"}
    with pytest.raises(InvalidGuess):
        select("cats", cands)
    assert cands == {"cat", "dog"}


def test_bucket_sizes_ignore_duplicate_inputs():
    words = ["crane", "crane", "raise", "stare", "stare"]
    sizes = bucket_sizes("crane", words)
    assert sum(sizes.values()) == 3
    assert sizes == {p: len(ws) for p, ws in partition("crane", words).items()}
