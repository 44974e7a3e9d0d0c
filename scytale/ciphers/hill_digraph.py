"""
Hill Digraph Cipher
====================

2x2 Hill cipher over letter pairs.  A key ``[a b; c d]`` maps the
digraph ``(p1, p2)`` to ``(a*p1 + b*p2, c*p1 + d*p2) mod 26``.  The key
is invertible modulo 26 exactly when its determinant is coprime with 26;
the inverse is the adjugate scaled by the inverse determinant.

Plaintext of odd length is padded with a filler "X"; ciphertext of odd
length is rejected since no padding is assumed on the receiving side.

Reference:
    Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
    The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from scytale.ciphers.alphabet import letter_to_index
from scytale.ciphers.base import ClassicalCipher
from scytale.core.errors import InvalidDeterminantError, LengthError
from scytale_shared.math_utils import (
    MODULUS,
    IntArray,
    determinant_2x2,
    inverse_matrix_2x2,
    is_valid_multiplier,
)
from scytale_shared.models import CipherFamily

PADDING_LETTER: str = "X"

HillKey = Union[Sequence[int], Sequence[Sequence[int]]]


def _as_matrix(key: HillKey) -> IntArray:
    """Flatten *key* (4 ints or 2x2 nested) into a reduced 2x2 matrix."""
    flat = np.asarray(key, dtype=np.int64).reshape(-1)
    if flat.size != 4:
        raise ValueError(f"Hill digraph key needs 4 entries, got {flat.size}")
    return flat.reshape(2, 2) % MODULUS


class HillDigraphCipher(ClassicalCipher):
    """Hill cipher with a 2x2 key matrix.

    Usage::

        cipher = HillDigraphCipher([5, 3, 11, 8])
        cipher.encrypt("book")   # 'CLDS'

    Raises:
        InvalidDeterminantError: If the key determinant has no inverse.
    """

    family = CipherFamily.HILL_DIGRAPH

    def __init__(self, key: HillKey) -> None:
        self._key = _as_matrix(key)
        self._determinant = determinant_2x2(*self.key)
        inverse = inverse_matrix_2x2(self._key)
        if inverse is None:
            raise InvalidDeterminantError(self.key, self._determinant)
        self._inverse = inverse

    @classmethod
    def is_valid_key(cls, key: Sequence[int]) -> bool:
        if len(key) != 4:
            return False
        return is_valid_multiplier(determinant_2x2(*key))

    @classmethod
    def from_key(cls, key: Sequence[int]) -> HillDigraphCipher:
        return cls(key)

    @property
    def key(self) -> tuple[int, ...]:
        return tuple(int(v) for v in self._key.reshape(-1))

    @property
    def decryption_key(self) -> tuple[int, ...]:
        return tuple(int(v) for v in self._inverse.reshape(-1))

    @property
    def inverse(self) -> tuple[int, ...]:
        """Inverse key matrix, row-major."""
        return self.decryption_key

    @property
    def determinant(self) -> int:
        return self._determinant

    # ------------------------------------------------------------------ #
    #  Hooks
    # ------------------------------------------------------------------ #

    def _prepare_plaintext(self, residues: list[int]) -> list[int]:
        if len(residues) % 2 != 0:
            return residues + [letter_to_index(PADDING_LETTER)]
        return residues

    def _check_ciphertext(self, residues: list[int]) -> None:
        if len(residues) % 2 != 0:
            raise LengthError(len(residues))

    @staticmethod
    def _apply(matrix: IntArray, residues: list[int]) -> list[int]:
        if not residues:
            return []
        # One digraph per column: (2x2) @ (2xN)
        digraphs = np.asarray(residues, dtype=np.int64).reshape(-1, 2).T
        return ((matrix @ digraphs) % MODULUS).T.reshape(-1).tolist()

    def _encrypt_residues(self, residues: list[int]) -> list[int]:
        return self._apply(self._key, residues)

    def _decrypt_residues(self, residues: list[int]) -> list[int]:
        return self._apply(self._inverse, residues)
