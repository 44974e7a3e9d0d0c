"""
Scytale Core Module
====================

Data models and the exception hierarchy of the Scytale workbench.  The
engine facade lives in :mod:`scytale.core.engine`.
"""

from scytale.core.errors import (
    InvalidDeterminantError,
    InvalidKeyError,
    LengthError,
    ScytaleError,
    UnsupportedFamilyError,
)
from scytale.core.models import BruteForceResult, CribDragResult, FrequencyGuessResult

__all__ = [
    "BruteForceResult",
    "CribDragResult",
    "FrequencyGuessResult",
    "InvalidDeterminantError",
    "InvalidKeyError",
    "LengthError",
    "ScytaleError",
    "UnsupportedFamilyError",
]
