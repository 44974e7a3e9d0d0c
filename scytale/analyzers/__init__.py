"""
Scytale Analyzers
==================

Cryptanalysis engines.  Each one builds many candidate cipher engines
and returns every (key, plaintext) candidate for human judgment.
"""

from scytale.analyzers.brute_force import BruteForceAnalyzer
from scytale.analyzers.crib_drag import CribDragAnalyzer
from scytale.analyzers.frequency_guess import FrequencyGuessAnalyzer

__all__ = [
    "BruteForceAnalyzer",
    "CribDragAnalyzer",
    "FrequencyGuessAnalyzer",
]
