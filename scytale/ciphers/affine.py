"""
Affine Cipher
==============

Encryption ``C = a*P + b (mod 26)``; decryption ``P = c*C + d (mod 26)``
with ``c = a^-1`` and ``d = -b*c`` forced into [0, 26).  The multiplier
``a`` must be coprime with 26; ``b`` is unconstrained.
"""

from __future__ import annotations

from typing import Sequence

from scytale.ciphers.base import MonoalphabeticCipher
from scytale.core.errors import InvalidKeyError
from scytale_shared.math_utils import MODULUS, is_valid_multiplier, mod_inverse
from scytale_shared.models import CipherFamily


class AffineCipher(MonoalphabeticCipher):
    """Affine substitution cipher.

    Usage::

        cipher = AffineCipher(239, 152)
        cipher.encrypt("drink water")   # 'PHONY GARUH'
        cipher.decrypt("PHONY GARUH")   # 'DRINKWATER'

    Raises:
        InvalidKeyError: If *a* has no inverse modulo 26.
    """

    family = CipherFamily.AFFINE

    def __init__(self, a: int, b: int) -> None:
        if not is_valid_multiplier(a):
            raise InvalidKeyError(
                f"Invalid affine multiplier {a}: not coprime with 26",
                {"key": [a, b]},
            )
        self._a = a
        self._b = b
        self._c = mod_inverse(a)
        self._d = (-b * self._c) % MODULUS

    @classmethod
    def is_valid_key(cls, key: Sequence[int]) -> bool:
        return len(key) == 2 and is_valid_multiplier(key[0])

    @property
    def key(self) -> tuple[int, ...]:
        return (self._a, self._b)

    @property
    def decryption_key(self) -> tuple[int, ...]:
        return (self._c, self._d)

    def _encrypt_residue(self, residue: int) -> int:
        return (residue * self._a + self._b) % MODULUS

    def _decrypt_residue(self, residue: int) -> int:
        return (residue * self._c + self._d) % MODULUS
