"""
Scytale Mathematical Utilities
===============================

Modular key arithmetic over the 26-letter alphabet and the letter
statistics used by the cryptanalysis engines.

Every classical cipher in Scytale routes key validation through
:func:`is_valid_multiplier` and inverse-key derivation through
:func:`mod_inverse`; nothing re-implements them per cipher family.

References (master list):
    [1] Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
        Approach. Mathematical Association of America.
    [2] Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
        The American Mathematical Monthly, 36(6), 306-312.
    [3] Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------------
MODULUS: int = 26

IntArray = NDArray[np.int64]


# ======================== Modular Key Arithmetic ===========================


def mod26(value: int) -> int:
    """Reduce *value* into the range [0, 26)."""
    return value % MODULUS


def is_valid_multiplier(key: int) -> bool:
    """Return ``True`` if *key* has a multiplicative inverse modulo 26.

    26 = 2 * 13, so a value is coprime with 26 exactly when it is odd
    and not a multiple of 13.  Twelve residues in [1, 25] qualify:
    1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25.

    Reference:
        Sinkov, A. (1966). Elementary Cryptanalysis, ch. 3.

    Args:
        key: Candidate multiplier (any integer, reduced implicitly).

    Returns:
        Whether *key* is a valid multiplicative key.
    """
    return key % 2 != 0 and key % 13 != 0


def mod_inverse(key: int) -> Optional[int]:
    """Find the multiplicative inverse of *key* modulo 26.

    Performs a linear search over [1, 25] for ``m`` such that
    ``key * m = 1 (mod 26)``.

    Args:
        key: Value to invert.

    Returns:
        The inverse in [1, 25], or ``None`` when *key* is not invertible.
    """
    if not is_valid_multiplier(key):
        return None
    for candidate in range(1, MODULUS):
        if key * candidate % MODULUS == 1:
            return candidate
    return None


def valid_multipliers() -> Iterator[int]:
    """Yield the 12 valid multiplicative keys in ascending order."""
    return (k for k in range(1, MODULUS) if is_valid_multiplier(k))


def determinant_2x2(a: int, b: int, c: int, d: int) -> int:
    """Determinant of the matrix ``[a b; c d]`` reduced modulo 26.

    Reference:
        Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
    """
    return mod26(a * d - b * c)


def inverse_matrix_2x2(matrix: IntArray) -> Optional[IntArray]:
    """Invert a 2x2 integer matrix modulo 26.

    The inverse is the adjugate ``[d -b; -c a]`` scaled by the modular
    inverse of the determinant, entrywise modulo 26.

    Args:
        matrix: 2x2 integer array.

    Returns:
        The inverse as a 2x2 ``int64`` array, or ``None`` when the
        determinant has no inverse modulo 26.
    """
    a, b = int(matrix[0, 0]), int(matrix[0, 1])
    c, d = int(matrix[1, 0]), int(matrix[1, 1])
    det_inverse = mod_inverse(determinant_2x2(a, b, c, d))
    if det_inverse is None:
        return None

    adjugate = np.array([[d, -b], [-c, a]], dtype=np.int64) % MODULUS
    return (adjugate * det_inverse) % MODULUS


# ========================== Letter Statistics ==============================


def letter_counts(text: str) -> dict[str, int]:
    """Count occurrences of each letter in *text*.

    Counting is case-insensitive; characters outside A-Z are ignored.

    Returns:
        Mapping of uppercase letter to count, in first-seen order.
    """
    return dict(Counter(ch.upper() for ch in text if ch.isascii() and ch.isalpha()))


def index_of_coincidence(text: str) -> float:
    """Compute the Index of Coincidence over the letters of *text*.

    .. math::

        IC = \\frac{\\sum_i f_i (f_i - 1)}{N (N - 1)}

    English plaintext (and any monoalphabetic encryption of it) sits
    near 0.0667; uniformly random letters near 0.0385.

    Reference:
        Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.

    Args:
        text: Text to analyse.

    Returns:
        IC value, or 0.0 when fewer than two letters are present.
    """
    counts = np.array(list(letter_counts(text).values()), dtype=np.float64)
    n = counts.sum()
    if n < 2:
        return 0.0
    return float(np.sum(counts * (counts - 1)) / (n * (n - 1)))
