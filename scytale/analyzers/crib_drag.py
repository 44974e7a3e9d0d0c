"""
Crib-Drag Analyzer
===================

Known-plaintext attack on the 2x2 Hill digraph cipher.

The crib is dragged across every offset of the ciphertext.  At each
offset the crib is aligned to digraph boundaries, and every aligned
(plaintext, ciphertext) digraph pair gives two linear congruences::

    a*p1 + b*p2 = c1  (mod 26)
    c*p1 + d*p2 = c2  (mod 26)

The first row ``(a, b)`` and the second row ``(c, d)`` of the key are
independent, so each is solved by testing all 676 combinations against
every congruence at once.  The cross product of both solution sets is
filtered to invertible matrices, the whole ciphertext is decrypted under
each, and only keys that reproduce the full crib at the original offset
survive.

Reference:
    Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
    The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from scytale.ciphers import HillDigraphCipher
from scytale.ciphers.alphabet import normalize, to_residues
from scytale.core.models import CribDragResult
from scytale_shared.math_utils import MODULUS, determinant_2x2, is_valid_multiplier
from scytale_shared.models import Candidate, CipherFamily

# (p1, p2, c): plaintext digraph and the ciphertext residue of one key row
Congruence = tuple[int, int, int]

# Every (x, y) in [0, 26)^2, x-major
_GRID_X, _GRID_Y = np.meshgrid(np.arange(MODULUS), np.arange(MODULUS), indexing="ij")
_ROW_X = _GRID_X.reshape(-1)
_ROW_Y = _GRID_Y.reshape(-1)


class CribDragAnalyzer:
    """Recovers Hill digraph keys from a ciphertext and a crib.

    Usage::

        analyzer = CribDragAnalyzer()
        result = analyzer.analyze(
            "KMYEM UPAUO AHOJR YUKTT CACQC XXIYE DKSTQ ZXDAW", "STEVE"
        )
        for candidate in result.candidates:
            print(candidate.key, candidate.plaintext)

    The search is total: an empty crib, a crib longer than the
    ciphertext, or an odd-length ciphertext yields no candidates.
    """

    def analyze(self, ciphertext: str, crib: str) -> CribDragResult:
        """Drag *crib* over every offset of *ciphertext*.

        Returns:
            CribDragResult with candidates ordered by offset, then key.
        """
        ciphertext = normalize(ciphertext)
        crib = normalize(crib)
        result = CribDragResult(crib=crib)
        if not crib or len(crib) > len(ciphertext) or len(ciphertext) % 2 != 0:
            return result

        offsets = range(len(ciphertext) - len(crib) + 1)
        for offset in offsets:
            found = self.check_offset(ciphertext, crib, offset)
            if found:
                result.matched_offsets.append(offset)
                result.candidates.extend(found)
        result.offsets_checked = len(offsets)
        return result

    def check_offset(self, ciphertext: str, crib: str, offset: int) -> list[Candidate]:
        """Candidates placing *crib* at ciphertext position *offset*."""
        ciphertext = normalize(ciphertext)
        crib = normalize(crib)
        if len(ciphertext) % 2 != 0:
            return []

        position, aligned = offset, crib
        if position % 2 == 1:
            position += 1
            aligned = aligned[1:]
        if len(aligned) % 2 == 1:
            aligned = aligned[:-1]
        if not aligned:
            return []

        encrypted = to_residues(ciphertext[position:position + len(aligned)])
        plain = to_residues(aligned)
        if len(encrypted) < len(plain):
            return []

        first_row: list[Congruence] = []
        second_row: list[Congruence] = []
        for i in range(0, len(plain), 2):
            first_row.append((plain[i], plain[i + 1], encrypted[i]))
            second_row.append((plain[i], plain[i + 1], encrypted[i + 1]))

        second_row_solutions = self.solve_row(second_row)
        candidates: list[Candidate] = []
        for a, b in self.solve_row(first_row):
            for c, d in second_row_solutions:
                if not is_valid_multiplier(determinant_2x2(a, b, c, d)):
                    continue
                cipher = HillDigraphCipher((a, b, c, d))
                plaintext = cipher.decrypt(ciphertext)
                if plaintext[offset:offset + len(crib)] == crib:
                    candidates.append(Candidate(
                        family=CipherFamily.HILL_DIGRAPH,
                        key=cipher.key,
                        plaintext=plaintext,
                        offset=offset,
                    ))
        return candidates

    @staticmethod
    def solve_row(congruences: Sequence[Congruence]) -> list[tuple[int, int]]:
        """All ``(x, y)`` in [0, 26)^2 with ``x*p1 + y*p2 = c`` for every congruence.

        Returned in ascending ``x``, then ascending ``y`` order.
        """
        mask = np.ones(_ROW_X.shape, dtype=bool)
        for p1, p2, c in congruences:
            mask &= (_ROW_X * p1 + _ROW_Y * p2) % MODULUS == c
        return [(int(x), int(y)) for x, y in zip(_ROW_X[mask], _ROW_Y[mask])]
