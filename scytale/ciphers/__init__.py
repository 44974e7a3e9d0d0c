"""
Scytale Cipher Engines
=======================

The four classical cipher families and a registry to build them by
family name.
"""

from __future__ import annotations

from typing import Sequence

from scytale.ciphers.additive import AdditiveCipher
from scytale.ciphers.affine import AffineCipher
from scytale.ciphers.base import ClassicalCipher, MonoalphabeticCipher
from scytale.ciphers.hill_digraph import HillDigraphCipher
from scytale.ciphers.multiplicative import MultiplicativeCipher
from scytale_shared.models import CipherFamily

CIPHERS: dict[CipherFamily, type[ClassicalCipher]] = {
    CipherFamily.ADDITIVE: AdditiveCipher,
    CipherFamily.MULTIPLICATIVE: MultiplicativeCipher,
    CipherFamily.AFFINE: AffineCipher,
    CipherFamily.HILL_DIGRAPH: HillDigraphCipher,
}


def create_cipher(family: CipherFamily | str, key: Sequence[int]) -> ClassicalCipher:
    """Build a cipher of *family* keyed with *key*.

    Args:
        family: Cipher family or its name (aliases such as ``"caesar"``
                are accepted).
        key:    Flat key integers, e.g. ``[3]``, ``[239, 152]`` or
                ``[5, 3, 11, 8]``.

    Raises:
        ValueError: If the family is unknown or *key* has the wrong arity.
        InvalidKeyError: If the key has no inverse modulo 26.
    """
    if isinstance(family, str):
        family = CipherFamily.parse(family)
    if len(key) != family.key_arity:
        raise ValueError(
            f"{family.label} key needs {family.key_arity} integer(s), got {len(key)}"
        )
    return CIPHERS[family].from_key(key)


__all__ = [
    "AdditiveCipher",
    "AffineCipher",
    "CIPHERS",
    "ClassicalCipher",
    "HillDigraphCipher",
    "MonoalphabeticCipher",
    "MultiplicativeCipher",
    "create_cipher",
]
