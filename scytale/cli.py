"""
Scytale CLI
============

Click-based command-line interface for the Scytale classical cipher
workbench.  Provides subcommands to encrypt and decrypt with the four
cipher families and to attack ciphertext by brute force, frequency
guessing and crib dragging.

Usage::

    python -m scytale encrypt affine --key 239,152 "drink water"
    python -m scytale decrypt hill --key 5,3,11,8 CLDS
    python -m scytale brute-force caesar "QUPCV OZGTM BAOMB IXQHH I"
    python -m scytale frequency "NTYNC NSOGN ..." --guess E --depth 2
    python -m scytale crib "KMYEM UPAUO ..." --crib STEVE

Text arguments given as ``-`` are read from standard input.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Callable, Optional

import click

from scytale import __version__
from scytale.core.engine import ScytaleEngine
from scytale.core.errors import ScytaleError
from scytale.output.console import ScytaleConsoleOutput
from scytale.output.report import ScytaleReportGenerator
from scytale_shared.config import ScytaleConfig
from scytale_shared.console import ScytaleConsole
from scytale_shared.models import AnalysisResult, CipherFamily


# ===================================================================== #
#  Parameter Types
# ===================================================================== #

_FAMILY_NAMES = [
    "additive", "caesar", "multiplicative", "affine", "hill", "hill-digraph",
]


class KeyParamType(click.ParamType):
    """Comma- or space-separated integers, e.g. ``239,152``."""

    name = "key"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        parts = [p for p in re.split(r"[,\s]+", str(value).strip()) if p]
        try:
            key = tuple(int(p) for p in parts)
        except ValueError:
            self.fail(f"{value!r} is not a list of integers", param, ctx)
        if not key:
            self.fail("key must contain at least one integer", param, ctx)
        return key


KEY = KeyParamType()
FAMILY = click.Choice(_FAMILY_NAMES, case_sensitive=False)


def _read_text(value: str) -> str:
    """Return *value*, or standard input when *value* is ``-``."""
    if value == "-":
        return click.get_text_stream("stdin").read()
    return value


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Scytale configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log engine activity at DEBUG level.",
)
@click.version_option(__version__, prog_name="scytale")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Scytale -- Classical Cipher Workbench.

    Encrypt and decrypt with Additive, Multiplicative, Affine and Hill
    digraph ciphers, and recover their keys from ciphertext.
    """
    ctx.ensure_object(dict)

    scytale_config = ScytaleConfig.load(config)
    if verbose:
        scytale_config.global_settings.log_level = "DEBUG"
    ctx.obj["config"] = scytale_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = ScytaleConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = ScytaleEngine(scytale_config)
    ctx.obj["display"] = ScytaleConsoleOutput(
        console,
        max_candidates=scytale_config.cryptanalysis.max_display_candidates,
    )
    ctx.obj["reporter"] = ScytaleReportGenerator(version=__version__)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _execute(ctx: click.Context, action: Callable[[], AnalysisResult]) -> AnalysisResult:
    """Run *action*; report key and length errors and exit with status 1."""
    try:
        return action()
    except (ScytaleError, ValueError) as exc:
        message = exc.message if isinstance(exc, ScytaleError) else str(exc)
        if ctx.obj["quiet"]:
            click.echo(f"Error: {message}", err=True)
        else:
            ctx.obj["console"].error(message)
        ctx.exit(1)


def _handle_output(ctx: click.Context, result: AnalysisResult) -> None:
    """Write a JSON or HTML report according to the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: ScytaleReportGenerator = ctx.obj["reporter"]
    console: ScytaleConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_report(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            settings = ctx.obj["config"].global_settings
            path = Path(settings.output_dir) / f"scytale_{result.operation}.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Cipher Subcommands
# ===================================================================== #

@cli.command()
@click.argument("family", type=FAMILY)
@click.argument("message")
@click.option("--key", "-k", type=KEY, required=True, help="Key integers, e.g. 239,152.")
@click.pass_context
def encrypt(ctx: click.Context, family: str, message: str, key: tuple[int, ...]) -> None:
    """Encrypt MESSAGE with a FAMILY cipher; output is in 5-letter blocks."""
    engine: ScytaleEngine = ctx.obj["engine"]
    text = _read_text(message)
    result = _execute(ctx, lambda: engine.encrypt(family, key, text))

    if ctx.obj["output_format"] == "console":
        if ctx.obj["quiet"]:
            click.echo(result.output)
        else:
            ctx.obj["display"].display_cipher(result)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("family", type=FAMILY)
@click.argument("ciphertext")
@click.option("--key", "-k", type=KEY, required=True, help="Key integers, e.g. 5,3,11,8.")
@click.pass_context
def decrypt(ctx: click.Context, family: str, ciphertext: str, key: tuple[int, ...]) -> None:
    """Decrypt CIPHERTEXT with a FAMILY cipher."""
    engine: ScytaleEngine = ctx.obj["engine"]
    text = _read_text(ciphertext)
    result = _execute(ctx, lambda: engine.decrypt(family, key, text))

    if ctx.obj["output_format"] == "console":
        if ctx.obj["quiet"]:
            click.echo(result.output)
        else:
            ctx.obj["display"].display_cipher(result)
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Cryptanalysis Subcommands
# ===================================================================== #

def _show_candidates(ctx: click.Context, result: AnalysisResult) -> None:
    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result)
        return
    if ctx.obj["quiet"]:
        for candidate in result.candidates:
            click.echo(f"{candidate.key_label}: {candidate.plaintext}")
        return
    display: ScytaleConsoleOutput = ctx.obj["display"]
    if result.operation == "frequency_guess":
        display.display_frequency(result)
    display.display_candidates(result)


@cli.command("brute-force")
@click.argument(
    "family",
    type=click.Choice(["additive", "caesar", "multiplicative"], case_sensitive=False),
)
@click.argument("ciphertext")
@click.pass_context
def brute_force(ctx: click.Context, family: str, ciphertext: str) -> None:
    """Decrypt CIPHERTEXT under every Additive or Multiplicative key."""
    engine: ScytaleEngine = ctx.obj["engine"]
    text = _read_text(ciphertext)
    result = _execute(ctx, lambda: engine.brute_force(CipherFamily.parse(family), text))
    _show_candidates(ctx, result)


@cli.command()
@click.argument("ciphertext")
@click.option(
    "--guess", "-g",
    default=None,
    help="Plaintext letter(s) assumed for the most frequent letters (default: E).",
)
@click.option(
    "--depth", "-d",
    type=click.IntRange(min=1),
    default=None,
    help="Number of frequency tiers to try (default: 1).",
)
@click.pass_context
def frequency(
    ctx: click.Context, ciphertext: str, guess: Optional[str], depth: Optional[int]
) -> None:
    """Attack an Affine CIPHERTEXT by guessing its most frequent letters."""
    engine: ScytaleEngine = ctx.obj["engine"]
    text = _read_text(ciphertext)
    result = _execute(ctx, lambda: engine.frequency_guess(text, guess=guess, depth=depth))
    _show_candidates(ctx, result)


@cli.command()
@click.argument("ciphertext")
@click.option("--crib", required=True, help="Plaintext fragment believed to occur.")
@click.pass_context
def crib(ctx: click.Context, ciphertext: str, crib: str) -> None:
    """Recover Hill digraph keys of CIPHERTEXT from a known crib."""
    engine: ScytaleEngine = ctx.obj["engine"]
    console: ScytaleConsole = ctx.obj["console"]
    text = _read_text(ciphertext)
    with console.status("Dragging crib..."):
        result = _execute(ctx, lambda: engine.crib_drag(text, crib))
    _show_candidates(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Scytale CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
