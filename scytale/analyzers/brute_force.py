"""
Brute-Force Analyzer
=====================

Exhaustive key search for the scalar-key cipher families.  The Additive
key space holds 25 shifts, the Multiplicative key space the 12 factors
coprime with 26; both are small enough to decrypt under every key and
let a human pick the readable result.
"""

from __future__ import annotations

from typing import Iterator

from scytale.ciphers import AdditiveCipher, MultiplicativeCipher
from scytale.ciphers.alphabet import normalize
from scytale.core.errors import UnsupportedFamilyError
from scytale.core.models import BruteForceResult
from scytale_shared.math_utils import MODULUS, valid_multipliers
from scytale_shared.models import Candidate, CipherFamily

SUPPORTED_FAMILIES: tuple[CipherFamily, ...] = (
    CipherFamily.ADDITIVE,
    CipherFamily.MULTIPLICATIVE,
)


class BruteForceAnalyzer:
    """Decrypts a ciphertext under every key of a scalar cipher family.

    Usage::

        analyzer = BruteForceAnalyzer(CipherFamily.ADDITIVE)
        result = analyzer.analyze("QUPCV OZGTM BAOMB IXQHH I")
        for candidate in result.candidates:
            print(candidate.key[0], candidate.plaintext)

    Raises:
        UnsupportedFamilyError: For the Affine and Hill families.
    """

    def __init__(self, family: CipherFamily) -> None:
        if family not in SUPPORTED_FAMILIES:
            raise UnsupportedFamilyError(family.value, type(self).__name__)
        self.family = family

    def keys(self) -> Iterator[int]:
        """Yield the family's key space in ascending order."""
        if self.family is CipherFamily.ADDITIVE:
            return iter(range(1, MODULUS))
        return valid_multipliers()

    def analyze(self, ciphertext: str) -> BruteForceResult:
        """Return one candidate per key, in ascending key order."""
        ciphertext = normalize(ciphertext)
        cipher_cls = (
            AdditiveCipher
            if self.family is CipherFamily.ADDITIVE
            else MultiplicativeCipher
        )
        candidates = [
            Candidate(
                family=self.family,
                key=(key,),
                plaintext=cipher_cls(key).decrypt(ciphertext),
            )
            for key in self.keys()
        ]
        return BruteForceResult(
            family=self.family,
            key_space=len(candidates),
            candidates=candidates,
        )
