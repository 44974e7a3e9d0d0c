"""
Scytale Report Generator
=========================

Generates JSON and HTML reports from Scytale results.  The HTML report
uses inline CSS for portability; the JSON report is the machine-readable
form of the same :class:`AnalysisResult`.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from scytale_shared.models import AnalysisResult


_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Scytale Report - {title}</title>
    <style>
        body {{
            font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: #0d1117;
            color: #c9d1d9;
            padding: 2rem;
        }}
        h1 {{ color: #58a6ff; }}
        h2 {{ color: #bc8cff; border-bottom: 1px solid #30363d; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #30363d; padding: 0.3rem 0.6rem; text-align: left; }}
        th {{ background: #21262d; }}
        td.key {{ color: #3fb950; white-space: nowrap; }}
        td.text {{ font-family: monospace; word-break: break-all; }}
        .meta {{ color: #8b949e; }}
    </style>
</head>
<body>
    <h1>Scytale -- {title}</h1>
    <p class="meta">Generated {generated_at} | Input: {target}</p>
    <p>{summary}</p>
    {output_section}
    {candidates_section}
    <h2>Metadata</h2>
    <pre>{metadata}</pre>
</body>
</html>
"""


class ScytaleReportGenerator:
    """Writes Scytale results to JSON or HTML files.

    Usage::

        reporter = ScytaleReportGenerator()
        reporter.generate_json(result, Path("crib.json"))
        reporter.generate_html(result, Path("crib.html"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build_report(self, result: AnalysisResult) -> dict[str, Any]:
        """Assemble the report dictionary shared by both formats."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "version": self.version,
                "operation": result.operation,
                "family": result.family.value if result.family else None,
                "target": result.target,
            },
            "summary": {
                "description": result.summary,
                "candidate_count": result.candidate_count,
                "duration_seconds": result.duration_seconds,
            },
            "output": result.output,
            "candidates": [
                c.model_dump(mode="json", exclude_none=True) for c in result.candidates
            ],
            "metadata": result.metadata,
        }

    def generate_json(self, result: AnalysisResult, output_path: Path) -> Path:
        """Write *result* as an indented JSON document.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_report(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def generate_html(self, result: AnalysisResult, output_path: Path) -> Path:
        """Write *result* as a standalone HTML page.

        Returns:
            Path to the generated HTML file.
        """
        report = self.build_report(result)
        family = result.family.label if result.family else ""
        page = _HTML_TEMPLATE.format(
            title=html.escape(f"{family} {result.operation}".strip()),
            generated_at=report["report_metadata"]["generated_at"],
            target=html.escape(result.target),
            summary=html.escape(result.summary),
            output_section=self._build_output_html(result),
            candidates_section=self._build_candidates_html(result),
            metadata=html.escape(
                json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
            ),
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_output_html(result: AnalysisResult) -> str:
        if not result.output:
            return ""
        return f'<h2>Output</h2><pre>{html.escape(result.output)}</pre>'

    @staticmethod
    def _build_candidates_html(result: AnalysisResult) -> str:
        if not result.candidates:
            if result.operation in ("encrypt", "decrypt"):
                return ""
            return "<h2>Candidates</h2><p>No candidates.</p>"

        show_offset = any(c.offset is not None for c in result.candidates)
        header = "<th>#</th><th>Key</th>"
        if show_offset:
            header += "<th>Offset</th>"
        header += "<th>Plaintext</th>"

        rows: list[str] = []
        for idx, candidate in enumerate(result.candidates, start=1):
            cells = f"<td>{idx}</td><td class=\"key\">{candidate.key_label}</td>"
            if show_offset:
                cells += f"<td>{candidate.offset}</td>"
            cells += f"<td class=\"text\">{html.escape(candidate.plaintext)}</td>"
            rows.append(f"<tr>{cells}</tr>")

        return (
            f"<h2>Candidates ({len(result.candidates)})</h2>"
            f"<table><tr>{header}</tr>{''.join(rows)}</table>"
        )
