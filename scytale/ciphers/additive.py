"""
Additive (Caesar) Cipher
=========================

``C = P + k (mod 26)``.  Addition modulo 26 is always invertible, so no
shift is ever rejected: the decryption shift is ``(26 - k) mod 26``.

Reference:
    Suetonius, De Vita Caesarum, Divus Iulius LVI.
"""

from __future__ import annotations

from typing import Sequence

from scytale.ciphers.base import MonoalphabeticCipher
from scytale_shared.math_utils import MODULUS
from scytale_shared.models import CipherFamily


class AdditiveCipher(MonoalphabeticCipher):
    """Caesar shift cipher.

    Usage::

        cipher = AdditiveCipher(3)
        cipher.encrypt("some message")   # 'VRPHP HVVDJ H'
        cipher.decrypt("VRPHP HVVDJ H")  # 'SOMEMESSAGE'
    """

    family = CipherFamily.ADDITIVE

    def __init__(self, shift: int) -> None:
        self._shift = shift
        self._inverse_shift = (MODULUS - shift) % MODULUS

    @classmethod
    def is_valid_key(cls, key: Sequence[int]) -> bool:
        return len(key) == 1

    @property
    def key(self) -> tuple[int, ...]:
        return (self._shift,)

    @property
    def decryption_key(self) -> tuple[int, ...]:
        return (self._inverse_shift,)

    @staticmethod
    def _shift_residue(residue: int, shift: int) -> int:
        # Result lies in [1, 26]; the codec decodes 26 as "Z".
        return (residue + shift - 1) % MODULUS + 1

    def _encrypt_residue(self, residue: int) -> int:
        return self._shift_residue(residue, self._shift)

    def _decrypt_residue(self, residue: int) -> int:
        return self._shift_residue(residue, self._inverse_shift)


def encrypt(message: str, shift: int) -> str:
    """Caesar-encrypt *message* with *shift*, formatted in 5-letter blocks."""
    return AdditiveCipher(shift).encrypt(message)


def decrypt(ciphertext: str, shift: int) -> str:
    """Caesar-decrypt *ciphertext* that was encrypted with *shift*."""
    return AdditiveCipher(shift).decrypt(ciphertext)
