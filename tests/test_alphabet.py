"""Tests for the letter/residue codec."""

from scytale.ciphers.alphabet import (
    from_residues,
    index_to_letter,
    letter_to_index,
    normalize,
    to_blocks,
    to_residues,
)


def test_letter_to_index_convention():
    assert letter_to_index("A") == 1
    assert letter_to_index("y") == 25
    assert letter_to_index("Z") == 0


def test_index_to_letter_wraps():
    assert index_to_letter(1) == "A"
    assert index_to_letter(0) == "Z"
    assert index_to_letter(26) == "Z"
    assert index_to_letter(27) == "A"


def test_codec_is_bijective():
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert from_residues(to_residues(letters)) == letters
    assert sorted(to_residues(letters)) == list(range(26))


def test_normalize_drops_non_ascii_letters():
    assert normalize("Drink water!") == "DRINKWATER"
    assert normalize("текст and 42") == "AND"
    assert normalize("straße") == "STRAE"
    assert normalize("") == ""


def test_to_blocks():
    assert to_blocks("THISISSOMEWEIRD") == "THISI SSOME WEIRD"
    assert to_blocks("ABCDEFG") == "ABCDE FG"
    assert to_blocks("") == ""
