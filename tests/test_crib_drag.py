"""Tests for the Hill digraph crib-drag attack."""

from scytale.analyzers import CribDragAnalyzer
from scytale_shared.models import CipherFamily


def _found(result):
    return [(c.key, c.plaintext) for c in result.candidates]


def test_recovers_key_from_crib(hill_ciphertext):
    result = CribDragAnalyzer().analyze(hill_ciphertext, "STEVE")
    assert (
        (5, 3, 9, 6),
        "IFSTEVEWANTSTOKEEPTHEJOBHEMUSTWORKHARDER",
    ) in _found(result)
    match = next(c for c in result.candidates if c.key == (5, 3, 9, 6))
    assert match.offset == 2
    assert match.family is CipherFamily.HILL_DIGRAPH
    assert 2 in result.matched_offsets


def test_crib_is_normalized():
    result = CribDragAnalyzer().analyze("BQGIN CDMDN CXPSR XMYSX GZ", "mall")
    assert result.crib == "MALL"
    assert ((5, 3, 9, 6), "MEETYOUATTHEMALLATNINE") in _found(result)


def test_odd_length_crib():
    result = CribDragAnalyzer().analyze("CMOWL KURLO DPPMM GROBD UTOTF YSNIL HQ", "SCHWA")
    assert ((7, 3, 3, 2), "IFMRSCHWASRTISABSENTLETSCUTCLASS") in _found(result)


def test_every_candidate_contains_crib(hill_ciphertext):
    result = CribDragAnalyzer().analyze(hill_ciphertext, "STEVE")
    assert result.candidates
    for candidate in result.candidates:
        assert candidate.plaintext[candidate.offset:candidate.offset + 5] == "STEVE"


def test_ordered_by_offset_then_key(hill_ciphertext):
    result = CribDragAnalyzer().analyze(hill_ciphertext, "STEVE")
    order = [(c.offset, c.key) for c in result.candidates]
    assert order == sorted(order)


def test_offsets_checked(hill_ciphertext):
    result = CribDragAnalyzer().analyze(hill_ciphertext, "STEVE")
    assert result.offsets_checked == 40 - 5 + 1


def test_check_offset_single_position(hill_ciphertext):
    candidates = CribDragAnalyzer().check_offset(hill_ciphertext, "STEVE", 2)
    assert (5, 3, 9, 6) in [c.key for c in candidates]


def test_solve_row():
    # a*2 + b*15 = 3 and a*5 + b*20 = 7 (mod 26) for the row (5, 3)
    solutions = CribDragAnalyzer.solve_row([(2, 15, 3), (5, 20, 7)])
    assert (5, 3) in solutions
    assert solutions == sorted(solutions)


def test_empty_crib():
    result = CribDragAnalyzer().analyze("KMYEM UPAUO", "")
    assert result.candidates == []
    assert result.offsets_checked == 0


def test_crib_longer_than_ciphertext():
    assert CribDragAnalyzer().analyze("KMYE", "STEVEN").candidates == []


def test_odd_length_ciphertext():
    assert CribDragAnalyzer().analyze("KMYEM", "STE").candidates == []


def test_crib_at_odd_offset():
    result = CribDragAnalyzer().analyze("BQGIN CDMDN CXPSR XMYSX GZ", "EMALL")
    match = [c for c in result.candidates if c.key == (5, 3, 9, 6)]
    assert match
    assert match[0].offset == 11
    assert match[0].plaintext == "MEETYOUATTHEMALLATNINE"
