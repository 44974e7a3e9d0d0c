"""Shared fixtures for the Scytale test suite."""

from __future__ import annotations

import pytest

from scytale.core.engine import ScytaleEngine
from scytale_shared.config import GlobalConfig, ScytaleConfig


# Ciphertexts with a known key and plaintext
CAESAR_CIPHERTEXT = "QUPCV OZGTM BAOMB IXQHH I"
MULTIPLICATIVE_CIPHERTEXT = "YQDIU SOWJG MGQQQ TWPGF UMGQX BGTKY FUUV"
AFFINE_CIPHERTEXT = "RPIID XHIGGG MPOOH UIQVA GONIV QDXYI PQNII AEPRY IIWGOT T"
HILL_CIPHERTEXT = "KMYEM UPAUO AHOJR YUKTT CACQC XXIYE DKSTQ ZXDAW"


@pytest.fixture
def quiet_config() -> ScytaleConfig:
    """Configuration that keeps the engine from writing log records."""
    return ScytaleConfig(global_settings=GlobalConfig(log_level="CRITICAL"))


@pytest.fixture
def engine(quiet_config: ScytaleConfig) -> ScytaleEngine:
    return ScytaleEngine(quiet_config)


@pytest.fixture
def caesar_ciphertext() -> str:
    return CAESAR_CIPHERTEXT


@pytest.fixture
def multiplicative_ciphertext() -> str:
    return MULTIPLICATIVE_CIPHERTEXT


@pytest.fixture
def affine_ciphertext() -> str:
    return AFFINE_CIPHERTEXT


@pytest.fixture
def hill_ciphertext() -> str:
    return HILL_CIPHERTEXT
