"""Tests for the 2x2 Hill digraph cipher."""

import pytest

from scytale.ciphers import HillDigraphCipher
from scytale.core.errors import InvalidDeterminantError, InvalidKeyError, LengthError


def test_encrypt():
    assert HillDigraphCipher([5, 3, 11, 8]).encrypt("book") == "CLDS"


def test_decrypt():
    assert HillDigraphCipher([5, 3, 11, 8]).decrypt("CLDS") == "BOOK"


def test_single_digraph():
    cipher = HillDigraphCipher([4, 5, 3, 6])
    assert cipher.encrypt("go") == "YG"
    assert cipher.decrypt("YG") == "GO"


def test_entries_reduced_and_inverse():
    cipher = HillDigraphCipher([40, 61, 27, 21])
    assert cipher.key == (14, 9, 1, 21)
    assert cipher.inverse == (5, 9, 1, 12)
    assert cipher.decryption_key == cipher.inverse
    assert cipher.determinant == 25


def test_accepts_nested_matrix():
    assert HillDigraphCipher([[5, 3], [11, 8]]).key == (5, 3, 11, 8)


def test_known_messages():
    cipher = HillDigraphCipher([5, 3, 9, 6])
    assert cipher.encrypt("Meet you at the mall at nine") == "BQGIN CDMDN CXPSR XMYSX GZ"
    cipher = HillDigraphCipher([7, 3, 3, 2])
    assert cipher.decrypt("CMOWL KURLO DPPMM GROBD UTOTF YSNIL HQ") == (
        "IFMRSCHWASRTISABSENTLETSCUTCLASS"
    )


def test_odd_plaintext_is_padded_with_x():
    cipher = HillDigraphCipher([5, 3, 11, 8])
    ciphertext = cipher.encrypt("boo")
    assert len(ciphertext) == 4
    assert cipher.decrypt(ciphertext) == "BOOX"


def test_odd_ciphertext_raises_length_error():
    with pytest.raises(LengthError) as exc_info:
        HillDigraphCipher([5, 3, 11, 8]).decrypt("CLD")
    assert exc_info.value.length == 3


@pytest.mark.parametrize("key", [[1, 2, 2, 4], [2, 0, 0, 1], [13, 0, 0, 1], [0, 0, 0, 0]])
def test_rejects_singular_keys(key):
    assert not HillDigraphCipher.is_valid_key(key)
    with pytest.raises(InvalidDeterminantError) as exc_info:
        HillDigraphCipher(key)
    assert isinstance(exc_info.value, InvalidKeyError)
    assert exc_info.value.determinant == exc_info.value.details["determinant"]


def test_wrong_entry_count():
    with pytest.raises(ValueError):
        HillDigraphCipher([1, 2, 3])


@pytest.mark.parametrize("key", [[5, 3, 11, 8], [3, 3, 2, 5], [1, 0, 0, 1], [25, 24, 1, 1]])
def test_round_trip(key):
    cipher = HillDigraphCipher(key)
    assert cipher.decrypt(cipher.encrypt("Hill ciphers use matrices")) == (
        "HILLCIPHERSUSEMATRICES"
    )
