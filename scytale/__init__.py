"""
Scytale -- Classical Cipher Workbench
======================================

Encryption, decryption and cryptanalysis for the classical mod-26
cipher families: Additive (Caesar), Multiplicative, Affine and the 2x2
Hill digraph cipher.

Modules:
    - scytale.ciphers: Cipher engines and the alphabet codec
    - scytale.analyzers: Brute-force, frequency-guess and crib-drag attacks
    - scytale.core.engine: Central orchestrator
    - scytale.core.models: Pydantic result models
    - scytale.output: Console and report output
    - scytale.cli: Click-based command-line interface

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical Approach.
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
"""

__version__ = "1.0.0"
__tool_name__ = "scytale"
