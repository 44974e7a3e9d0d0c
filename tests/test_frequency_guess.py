"""Tests for the Affine frequency-guess attack."""

import pytest

from scytale.analyzers import FrequencyGuessAnalyzer
from scytale_shared.models import CipherFamily


EXPECTED_PLAINTEXT = "THEENDLESSSCHOOLYEARISOVERANDWEHAVEEIGHTWEEKSOFF"


def test_most_common_letter():
    assert FrequencyGuessAnalyzer.most_common_letters("Hello there") == ["E"]


def test_most_common_letters_by_tier():
    assert FrequencyGuessAnalyzer.most_common_letters("Hello there", 2) == ["E", "H", "L"]
    assert FrequencyGuessAnalyzer.most_common_letters("Hello there", 3) == [
        "E", "H", "L", "O", "R", "T",
    ]


def test_most_common_letters_case_folded():
    assert FrequencyGuessAnalyzer.most_common_letters("aAb") == ["A"]


def test_try_with_guess(affine_ciphertext):
    candidates = FrequencyGuessAnalyzer.try_with_guess(affine_ciphertext, "I", "E")
    assert len(candidates) == 12
    assert [c.key[0] for c in candidates] == [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]
    assert (11, 6, EXPECTED_PLAINTEXT) in [(*c.key, c.plaintext) for c in candidates]


def test_analyze_recovers_key(affine_ciphertext):
    result = FrequencyGuessAnalyzer().analyze(affine_ciphertext)
    assert result.selected_letters == ["I"]
    assert len(result.candidates) == 12
    assert {c.family for c in result.candidates} == {CipherFamily.AFFINE}
    assert any(c.key == (11, 6) and c.plaintext == EXPECTED_PLAINTEXT for c in result.candidates)
    assert next(iter(result.letter_counts)) == "I"
    assert result.index_of_coincidence > 0


def test_candidate_count_scales_with_selection():
    result = FrequencyGuessAnalyzer(depth=2).analyze("Hello there")
    assert len(result.candidates) == 12 * len(result.selected_letters) == 36


def test_several_guess_letters():
    result = FrequencyGuessAnalyzer(guess="et").analyze("Hello there")
    assert result.guess_letters == "ET"
    assert len(result.candidates) == 24


def test_empty_ciphertext():
    result = FrequencyGuessAnalyzer().analyze("")
    assert result.selected_letters == []
    assert result.candidates == []
    assert result.index_of_coincidence == 0.0


@pytest.mark.parametrize("depth", [0, -1])
def test_rejects_depth_below_one(depth):
    with pytest.raises(ValueError):
        FrequencyGuessAnalyzer(depth=depth)


def test_rejects_guess_without_letters():
    with pytest.raises(ValueError):
        FrequencyGuessAnalyzer(guess="42")
