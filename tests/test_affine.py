"""Tests for the Affine cipher."""

import pytest

from scytale.ciphers import AffineCipher
from scytale.core.errors import InvalidKeyError
from scytale_shared.math_utils import valid_multipliers


def test_encrypt():
    assert AffineCipher(239, 152).encrypt("drink water") == "PHONY GARUH"


def test_decrypt():
    assert AffineCipher(239, 152).decrypt("PHONY GARUH") == "DRINKWATER"


def test_decryption_key():
    cipher = AffineCipher(239, 152)
    assert cipher.key == (239, 152)
    # c = 239^-1 = 21, d = -152 * 21 mod 26
    assert cipher.decryption_key == (21, 6)


@pytest.mark.parametrize("a", [0, 2, 13, 26, 100])
def test_rejects_multiplier_without_inverse(a):
    assert not AffineCipher.is_valid_key([a, 5])
    with pytest.raises(InvalidKeyError):
        AffineCipher(a, 5)


@pytest.mark.parametrize("a", list(valid_multipliers()))
@pytest.mark.parametrize("b", [0, 7, 25, -4])
def test_round_trip(a, b):
    cipher = AffineCipher(a, b)
    assert cipher.decrypt(cipher.encrypt("Sphinx of black quartz")) == "SPHINXOFBLACKQUARTZ"
