"""
Multiplicative Cipher
======================

``C = P * f (mod 26)``, decrypted with ``P = C * f^-1 (mod 26)``.
Only the 12 factors coprime with 26 have an inverse.
"""

from __future__ import annotations

from typing import Sequence

from scytale.ciphers.base import MonoalphabeticCipher
from scytale.core.errors import InvalidKeyError
from scytale_shared.math_utils import MODULUS, is_valid_multiplier, mod_inverse
from scytale_shared.models import CipherFamily


class MultiplicativeCipher(MonoalphabeticCipher):
    """Multiplicative substitution cipher.

    Raises:
        InvalidKeyError: If *factor* is even or a multiple of 13.
    """

    family = CipherFamily.MULTIPLICATIVE

    def __init__(self, factor: int) -> None:
        if not is_valid_multiplier(factor):
            raise InvalidKeyError(
                f"Invalid multiplicative key {factor}: not coprime with 26",
                {"key": [factor]},
            )
        self._factor = factor
        self._inverse = mod_inverse(factor)

    @classmethod
    def is_valid_key(cls, key: Sequence[int]) -> bool:
        return len(key) == 1 and is_valid_multiplier(key[0])

    @property
    def key(self) -> tuple[int, ...]:
        return (self._factor,)

    @property
    def decryption_key(self) -> tuple[int, ...]:
        return (self._inverse,)

    def _encrypt_residue(self, residue: int) -> int:
        return residue * self._factor % MODULUS

    def _decrypt_residue(self, residue: int) -> int:
        return residue * self._inverse % MODULUS
