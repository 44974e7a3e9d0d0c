"""
Cipher Engine Base Classes
===========================

The capability set shared by every classical cipher family:
validate-key, construct, encrypt and decrypt.

Encryption normalizes the message, transforms its residues and formats
the result in 5-letter blocks.  Decryption normalizes the ciphertext,
applies the inverse transform and returns a contiguous string.  Subclasses
only supply the residue transforms and their key handling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

from scytale.ciphers.alphabet import from_residues, to_blocks, to_residues
from scytale_shared.models import CipherFamily


class ClassicalCipher(ABC):
    """Abstract cipher engine keyed at construction time.

    A concrete engine is either fully valid (its decryption key exists) or
    its constructor raises :class:`~scytale.core.errors.InvalidKeyError`.
    Keys are never mutated after construction.
    """

    family: ClassVar[CipherFamily]

    @classmethod
    @abstractmethod
    def is_valid_key(cls, key: Sequence[int]) -> bool:
        """Return ``True`` if *key* can be used to build this cipher."""

    @classmethod
    def from_key(cls, key: Sequence[int]) -> ClassicalCipher:
        """Build the cipher from a flat sequence of key integers."""
        return cls(*key)

    @property
    @abstractmethod
    def key(self) -> tuple[int, ...]:
        """Encryption key as a tuple of integers."""

    @property
    @abstractmethod
    def decryption_key(self) -> tuple[int, ...]:
        """Decryption key derived from :attr:`key` at construction."""

    # ------------------------------------------------------------------ #
    #  Public operations
    # ------------------------------------------------------------------ #

    def encrypt(self, message: str) -> str:
        """Encrypt *message* and return it in 5-letter blocks."""
        residues = self._prepare_plaintext(to_residues(message))
        return to_blocks(from_residues(self._encrypt_residues(residues)))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt *ciphertext* and return contiguous uppercase text."""
        residues = to_residues(ciphertext)
        self._check_ciphertext(residues)
        return from_residues(self._decrypt_residues(residues))

    # ------------------------------------------------------------------ #
    #  Hooks
    # ------------------------------------------------------------------ #

    def _prepare_plaintext(self, residues: list[int]) -> list[int]:
        return residues

    def _check_ciphertext(self, residues: list[int]) -> None:
        return None

    @abstractmethod
    def _encrypt_residues(self, residues: list[int]) -> list[int]:
        ...

    @abstractmethod
    def _decrypt_residues(self, residues: list[int]) -> list[int]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={list(self.key)})"


class MonoalphabeticCipher(ClassicalCipher):
    """A cipher that maps each letter independently of its neighbours."""

    @abstractmethod
    def _encrypt_residue(self, residue: int) -> int:
        ...

    @abstractmethod
    def _decrypt_residue(self, residue: int) -> int:
        ...

    def _encrypt_residues(self, residues: list[int]) -> list[int]:
        return [self._encrypt_residue(p) for p in residues]

    def _decrypt_residues(self, residues: list[int]) -> list[int]:
        return [self._decrypt_residue(c) for c in residues]
