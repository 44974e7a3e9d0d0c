"""Tests for JSON and HTML report generation."""

import json

from scytale.output.report import ScytaleReportGenerator


def test_json_report(engine, caesar_ciphertext, tmp_path):
    result = engine.brute_force("caesar", caesar_ciphertext)
    path = ScytaleReportGenerator().generate_json(result, tmp_path / "out" / "bf.json")

    report = json.loads(path.read_text(encoding="utf-8"))
    assert report["report_metadata"]["operation"] == "brute_force"
    assert report["report_metadata"]["family"] == "additive"
    assert report["summary"]["candidate_count"] == 25
    assert {"family": "additive", "key": [8], "plaintext": "IMHUNGRYLETSGETAPIZZA"} in (
        report["candidates"]
    )


def test_html_report_escapes_input(engine, tmp_path):
    result = engine.encrypt("additive", [3], "<b>some message</b>")
    path = ScytaleReportGenerator().generate_html(result, tmp_path / "enc.html")

    page = path.read_text(encoding="utf-8")
    assert "&lt;b&gt;some message&lt;/b&gt;" in page
    assert "<b>some" not in page
    assert result.output in page


def test_html_report_lists_crib_offsets(engine, hill_ciphertext, tmp_path):
    result = engine.crib_drag(hill_ciphertext, "STEVE")
    page = ScytaleReportGenerator().generate_html(result, tmp_path / "crib.html").read_text(
        encoding="utf-8"
    )
    assert "<th>Offset</th>" in page
    assert "5,3,9,6" in page
