"""
Scytale Core Data Models
=========================

Pydantic models for the results of the cryptanalysis engines.  Each
result carries the full, unranked candidate list together with the
statistics the engine computed on the way, and serialises to JSON for
the report generators.

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from scytale_shared.models import Candidate, CipherFamily


class BruteForceResult(BaseModel):
    """Exhaustive key search over an Additive or Multiplicative key space.

    Attributes:
        family: Attacked cipher family.
        key_space: Number of keys tried (25 or 12).
        candidates: One candidate per key, in ascending key order.
    """

    family: CipherFamily
    key_space: int = 0
    candidates: list[Candidate] = Field(default_factory=list)


class FrequencyGuessResult(BaseModel):
    """Affine key candidates derived from letter-frequency guesses.

    Attributes:
        guess_letters: Plaintext letters assumed for the frequent letters.
        depth: Number of frequency tiers selected.
        letter_counts: Ciphertext letter counts, most frequent first.
        selected_letters: Ciphertext letters in the top *depth* tiers.
        index_of_coincidence: IC of the ciphertext letters.
        candidates: 12 candidates per (selected letter, guess letter) pair.
    """

    guess_letters: str = "E"
    depth: int = 1
    letter_counts: dict[str, int] = Field(default_factory=dict)
    selected_letters: list[str] = Field(default_factory=list)
    index_of_coincidence: float = 0.0
    candidates: list[Candidate] = Field(default_factory=list)


class CribDragResult(BaseModel):
    """Hill digraph keys consistent with a crib at some offset.

    Attributes:
        crib: Normalized crib.
        offsets_checked: Number of offsets examined.
        matched_offsets: Offsets that produced at least one candidate.
        candidates: Surviving (key, plaintext) pairs by offset, then key.
    """

    crib: str = ""
    offsets_checked: int = 0
    matched_offsets: list[int] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)
