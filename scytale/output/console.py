"""
Scytale Console Output
=======================

Rich-based console output for cipher and cryptanalysis results: a
summary panel for encryption/decryption, candidate tables for the
analyzers and a letter-frequency table for the Affine attack.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from scytale_shared.console import ScytaleConsole
from scytale_shared.models import AnalysisResult


class ScytaleConsoleOutput:
    """Console output formatters for Scytale results.

    Usage::

        output = ScytaleConsoleOutput(ScytaleConsole(), max_candidates=50)
        output.display_cipher(result)
        output.display_candidates(result)
    """

    def __init__(
        self,
        console: Optional[ScytaleConsole] = None,
        max_candidates: int = 50,
    ) -> None:
        self.console = console or ScytaleConsole()
        self.max_candidates = max_candidates
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Cipher operations
    # ------------------------------------------------------------------ #

    def display_cipher(self, result: AnalysisResult) -> None:
        """Show the outcome of an encrypt/decrypt operation."""
        family = result.family.label if result.family else "Unknown"
        self.console.section(f"{family} -- {result.operation.title()}")

        body = Text()
        body.append("Key: ", style="bold")
        body.append(f"{result.metadata.get('key')}\n", style="scytale.key")
        body.append("Decryption key: ", style="bold")
        body.append(f"{result.metadata.get('decryption_key')}\n", style="scytale.key")
        body.append("Input: ", style="bold")
        body.append(f"{result.target}\n")
        body.append("Output: ", style="bold")
        body.append(result.output, style="scytale.plaintext")

        self._rich.print(Panel(body, border_style="bright_cyan", padding=(1, 2)))

    # ------------------------------------------------------------------ #
    #  Cryptanalysis
    # ------------------------------------------------------------------ #

    def display_candidates(self, result: AnalysisResult) -> None:
        """Tabulate candidates, truncated to ``max_candidates`` rows."""
        family = result.family.label if result.family else "Unknown"
        self.console.section(f"{family} -- Candidates")

        if not result.candidates:
            self.console.warning("No candidate keys found.")
            return

        show_offset = any(c.offset is not None for c in result.candidates)
        shown = result.candidates[: self.max_candidates]

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Key", style="scytale.key", no_wrap=True)
        if show_offset:
            tbl.add_column("Offset", justify="right")
        tbl.add_column("Plaintext", style="scytale.plaintext", overflow="fold")

        for idx, candidate in enumerate(shown, start=1):
            row = [str(idx), candidate.key_label]
            if show_offset:
                row.append(str(candidate.offset))
            row.append(candidate.plaintext)
            tbl.add_row(*row)

        if len(result.candidates) > len(shown):
            tbl.caption = (
                f"Showing {len(shown)} of {len(result.candidates)} candidates"
            )
        self._rich.print(tbl)
        self.console.info(result.summary)

    def display_frequency(self, result: AnalysisResult) -> None:
        """Show ciphertext letter counts with the selected tiers highlighted."""
        counts: dict[str, int] = result.metadata.get("letter_counts", {})
        if not counts:
            return
        selected = set(result.metadata.get("selected_letters", []))

        self.console.section("Letter Frequencies")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        tbl.add_column("Letter")
        tbl.add_column("Count", justify="right")
        tbl.add_column("Selected", justify="center")
        for letter, count in counts.items():
            mark = "[scytale.success]✔[/scytale.success]" if letter in selected else ""
            tbl.add_row(letter, str(count), mark)

        ic = result.metadata.get("index_of_coincidence", 0.0)
        tbl.caption = f"Index of Coincidence: {ic:.4f}"
        self._rich.print(tbl)
