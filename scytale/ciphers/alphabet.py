"""
Alphabet Codec
===============

Pure letter <-> residue mapping used by every cipher family.

Letters "A".."Y" map to residues 1..25 and "Z" maps to 0.  Decoding
accepts any integer and treats 26 the same as 0, so formulas may produce
residues in [1, 26] without a final reduction.
"""

from __future__ import annotations

from typing import Iterable

BLOCK_SIZE: int = 5


def letter_to_index(letter: str) -> int:
    """Residue of *letter* (case-insensitive): A=1 ... Y=25, Z=0."""
    return (ord(letter.upper()) - ord("A") + 1) % 26


def index_to_letter(index: int) -> str:
    """Letter for residue *index*; 0 and 26 both decode to "Z"."""
    return chr(ord("A") + (index + 25) % 26)


def normalize(text: str) -> str:
    """Upper-case *text* and drop everything that is not an ASCII letter.

    >>> normalize("Drink water!")
    'DRINKWATER'
    """
    return "".join(ch.upper() for ch in text if ch.isascii() and ch.isalpha())


def to_residues(text: str) -> list[int]:
    """Normalize *text* and encode it as residues."""
    return [letter_to_index(ch) for ch in normalize(text)]


def from_residues(residues: Iterable[int]) -> str:
    return "".join(index_to_letter(int(r)) for r in residues)


def to_blocks(text: str, size: int = BLOCK_SIZE) -> str:
    """Group *text* into blocks of *size* letters separated by single spaces.

    >>> to_blocks("THISISSOMEWEIRD")
    'THISI SSOME WEIRD'
    """
    return " ".join(text[i:i + size] for i in range(0, len(text), size))
