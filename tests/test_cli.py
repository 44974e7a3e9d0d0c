"""Tests for the Click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from scytale.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_encrypt_quiet(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "affine", "drink water", "--key", "239,152"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "PHONY GARUH"


def test_decrypt_quiet(runner):
    result = runner.invoke(cli, ["-q", "decrypt", "hill", "CLDS", "-k", "5,3,11,8"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "BOOK"


def test_encrypt_console_panel(runner):
    result = runner.invoke(cli, ["encrypt", "caesar", "some message", "--key", "3"])
    assert result.exit_code == 0, result.output
    assert "VRPHP HVVDJ H" in result.output


def test_read_message_from_stdin(runner):
    result = runner.invoke(
        cli, ["-q", "encrypt", "multiplicative", "-", "--key", "3"],
        input="This is some weird message\n",
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "HXAEA EESMO QOABL MOEEC UO"


def test_invalid_key_exits_with_error(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "multiplicative", "hello", "--key", "13"])
    assert result.exit_code == 1
    assert "Invalid multiplicative key 13" in result.output


def test_odd_hill_ciphertext_exits_with_error(runner):
    result = runner.invoke(cli, ["-q", "decrypt", "hill", "CLD", "--key", "5,3,11,8"])
    assert result.exit_code == 1
    assert "must be even" in result.output


def test_wrong_key_arity_exits_with_error(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "affine", "hello", "--key", "5"])
    assert result.exit_code == 1


def test_malformed_key_is_usage_error(runner):
    result = runner.invoke(cli, ["encrypt", "affine", "hello", "--key", "five,3"])
    assert result.exit_code == 2


def test_unknown_family_is_usage_error(runner):
    result = runner.invoke(cli, ["encrypt", "vigenere", "hello", "--key", "3"])
    assert result.exit_code == 2


def test_brute_force_quiet(runner):
    result = runner.invoke(cli, ["-q", "brute-force", "caesar", "QUPCV OZGTM BAOMB IXQHH I"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 25
    assert "8: IMHUNGRYLETSGETAPIZZA" in lines


def test_brute_force_rejects_affine(runner):
    result = runner.invoke(cli, ["brute-force", "affine", "ABC"])
    assert result.exit_code == 2


def test_frequency_console(runner):
    result = runner.invoke(
        cli,
        ["frequency", "RPIID XHIGGG MPOOH UIQVA GONIV QDXYI PQNII AEPRY IIWGOT T"],
    )
    assert result.exit_code == 0, result.output
    assert "THEENDLESSSCHOOLYEARISOVERANDWEHAVEEIGHTWEEKSOFF" in result.output
    assert "Index of Coincidence" in result.output


def test_frequency_rejects_depth_zero(runner):
    result = runner.invoke(cli, ["frequency", "ABC", "--depth", "0"])
    assert result.exit_code == 2


def test_crib_json_output(runner):
    result = runner.invoke(
        cli,
        [
            "-o", "json", "crib",
            "KMYEM UPAUO AHOJR YUKTT CACQC XXIYE DKSTQ ZXDAW",
            "--crib", "STEVE",
        ],
    )
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["report_metadata"]["operation"] == "crib_drag"
    assert {
        "family": "hill",
        "key": [5, 3, 9, 6],
        "plaintext": "IFSTEVEWANTSTOKEEPTHEJOBHEMUSTWORKHARDER",
        "offset": 2,
    } in report["candidates"]


def test_html_output_file(runner, tmp_path):
    path = tmp_path / "report.html"
    result = runner.invoke(
        cli, ["-o", "html", "-f", str(path), "encrypt", "hill", "book", "--key", "5,3,11,8"],
    )
    assert result.exit_code == 0, result.output
    assert "CLDS" in path.read_text(encoding="utf-8")


def test_config_option(runner, tmp_path):
    config = tmp_path / "scytale.toml"
    config.write_text('[cryptanalysis]\nguess_letters = "ET"\n', encoding="utf-8")
    result = runner.invoke(
        cli, ["-c", str(config), "-q", "frequency", "Hello there"],
    )
    assert result.exit_code == 0, result.output
    assert len(result.output.strip().splitlines()) == 24
