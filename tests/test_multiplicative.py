"""Tests for the Multiplicative cipher."""

import pytest

from scytale.ciphers import MultiplicativeCipher
from scytale.core.errors import InvalidKeyError, ScytaleError
from scytale_shared.math_utils import valid_multipliers


def test_encrypt():
    cipher = MultiplicativeCipher(3)
    assert cipher.encrypt("This is some weird message") == "HXAEA EESMO QOABL MOEEC UO"


def test_decrypt():
    cipher = MultiplicativeCipher(3)
    assert cipher.decrypt("HXAEA EESMO QOABL MOEEC UO") == "THISISSOMEWEIRDMESSAGE"


@pytest.mark.parametrize("factor", [2, 4, 13, 26])
def test_rejects_factors_without_inverse(factor):
    assert not MultiplicativeCipher.is_valid_key([factor])
    with pytest.raises(InvalidKeyError) as exc_info:
        MultiplicativeCipher(factor)
    assert isinstance(exc_info.value, ScytaleError)
    assert exc_info.value.details == {"key": [factor]}


@pytest.mark.parametrize("factor", list(valid_multipliers()))
def test_round_trip_for_every_valid_factor(factor):
    cipher = MultiplicativeCipher(factor)
    assert cipher.decrypt(cipher.encrypt("Pack my box with five dozen jugs")) == (
        "PACKMYBOXWITHFIVEDOZENJUGS"
    )


def test_decryption_key():
    assert MultiplicativeCipher(3).decryption_key == (9,)
    assert MultiplicativeCipher(17).decryption_key == (23,)
