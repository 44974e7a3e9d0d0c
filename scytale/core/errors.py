"""
Scytale Exceptions
===================

Errors raised at the boundaries of the cipher engines: key validation at
construction and length validation at Hill decryption.  Cryptanalysis
engines never raise for short or empty input; they return no candidates.
"""

from __future__ import annotations

from typing import Any


class ScytaleError(Exception):
    """Base exception for all Scytale errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidKeyError(ScytaleError):
    """Raised when a key has no inverse modulo 26."""

    pass


class InvalidDeterminantError(InvalidKeyError):
    """Raised when a Hill matrix determinant has no inverse modulo 26."""

    def __init__(self, key: tuple[int, ...], determinant: int) -> None:
        super().__init__(
            f"Invalid determinant {determinant} for key {list(key)}: "
            f"no inverse modulo 26",
            {"key": list(key), "determinant": determinant},
        )
        self.determinant = determinant


class LengthError(ScytaleError):
    """Raised when Hill ciphertext does not split into whole digraphs."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"Invalid ciphertext length {length}: must be even",
            {"length": length},
        )
        self.length = length


class UnsupportedFamilyError(ScytaleError):
    """Raised when an analyzer is asked to attack a family it does not cover."""

    def __init__(self, family: str, analyzer: str) -> None:
        super().__init__(
            f"{analyzer} does not support the '{family}' cipher family",
            {"family": family, "analyzer": analyzer},
        )
