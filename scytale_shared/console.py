"""
Scytale Console Interface
==========================

Themed Rich console shared by every Scytale command: the banner,
section rules, status-coloured one-line messages and a spinner for the
slower cryptanalysis runs.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.text import Text
from rich.theme import Theme

SCYTALE_THEME = Theme(
    {
        "scytale.banner": "bold bright_cyan",
        "scytale.section": "bold bright_magenta",
        "scytale.success": "bold green",
        "scytale.warning": "bold yellow",
        "scytale.error": "bold red",
        "scytale.info": "bold bright_blue",
        "scytale.dim": "dim white",
        "scytale.key": "bold bright_green",
        "scytale.plaintext": "bright_white",
    }
)

_BANNER_ART = r"""
   ____            _        _
  / ___|  ___ _   _| |_ __ _| | ___
  \___ \ / __| | | | __/ _` | |/ _ \
   ___) | (__| |_| | || (_| | |  __/
  |____/ \___|\__, |\__\__,_|_|\___|
              |___/
"""

# (theme style, marker, label) per message kind
_MESSAGE_STYLES = {
    "success": ("scytale.success", "✔", "SUCCESS"),
    "warning": ("scytale.warning", "⚠", "WARNING"),
    "error": ("scytale.error", "✘", "ERROR"),
    "info": ("scytale.info", "ℹ", "INFO"),
}


class ScytaleConsole:
    """Unified console interface for Scytale commands.

    Usage::

        con = ScytaleConsole()
        con.banner("1.0.0")
        con.section("Candidates")
        con.success("Key recovered")

    Args:
        quiet: Suppress all output (library and test use).
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self._console = Console(theme=SCYTALE_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """The underlying Rich console, for tables and panels."""
        return self._console

    def banner(self, version: str) -> None:
        art = Text(_BANNER_ART, style="scytale.banner")
        art.append("\nClassical Cipher Workbench\n", style="bold bright_white")
        art.append(f"Version: {version}", style="scytale.dim")
        self._console.print(
            Panel(Align.center(art), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="scytale.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  One-line messages
    # ------------------------------------------------------------------ #

    def _message(self, kind: str, message: str) -> None:
        style, marker, label = _MESSAGE_STYLES[kind]
        line = Text.assemble((f"[{marker}] {label}: ", style), message)
        self._console.print(line)

    def success(self, message: str) -> None:
        self._message("success", message)

    def warning(self, message: str) -> None:
        self._message("warning", message)

    def error(self, message: str) -> None:
        self._message("error", message)

    def info(self, message: str) -> None:
        self._message("info", message)

    @contextmanager
    def status(self, message: str = "Working...") -> Iterator[Status]:
        """Show a spinner while the block runs.

        Example::

            with con.status("Dragging crib..."):
                result = engine.crib_drag(ciphertext, crib)
        """
        with self._console.status(
            Text(message, style="scytale.info"),
            spinner="dots",
            spinner_style="bright_cyan",
        ) as spinner:
            yield spinner
