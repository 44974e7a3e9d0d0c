"""
Scytale Configuration Management
=================================

Dataclass settings for the Scytale workbench, optionally read from a
TOML file.  A file may hold two tables::

    [global]
    log_level = "INFO"
    log_file = "scytale.log"

    [cryptanalysis]
    guess_letters = "ET"
    frequency_depth = 2

Keys left out keep their defaults; keys Scytale does not know are
ignored.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# config.toml next to the scytale packages
DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

_Section = TypeVar("_Section")


@dataclass(slots=True)
class CryptanalysisConfig:
    """Defaults for the cryptanalysis engines.

    ``guess_letters`` are the plaintext letters the Affine frequency
    attack assumes for the most common ciphertext letters, tried in
    order; ``frequency_depth`` is the number of frequency tiers used.
    ``max_display_candidates`` caps console tables, not results.

    Reference:
        Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
        Approach. Mathematical Association of America.
    """

    guess_letters: str = "E"
    frequency_depth: int = 1
    max_display_candidates: int = 50


@dataclass(slots=True)
class GlobalConfig:
    """Logging verbosity, log destination and report directory."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_dir: str = "output"


@dataclass(slots=True)
class ScytaleConfig:
    """Root configuration object passed to the engine and the CLI.

    Usage:
        >>> config = ScytaleConfig.load()               # config.toml, if present
        >>> config = ScytaleConfig.load("lab.toml")     # explicit file
        >>> config.cryptanalysis.guess_letters
        'E'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cryptanalysis: CryptanalysisConfig = field(default_factory=CryptanalysisConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ScytaleConfig:
        """Read settings from a TOML file.

        Without *path*, ``config.toml`` at the project root is used when
        it exists and built-in defaults otherwise.

        Raises:
            FileNotFoundError: If an explicit *path* does not exist.
        """
        if path is None:
            if not DEFAULT_CONFIG_PATH.is_file():
                return cls()
            config_path = DEFAULT_CONFIG_PATH
        else:
            config_path = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with config_path.open("rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            cryptanalysis=_section(CryptanalysisConfig, raw.get("cryptanalysis", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(section_type: type[_Section], table: dict[str, Any]) -> _Section:
    """Build *section_type* from the keys of *table* it declares."""
    known = {f.name for f in fields(section_type)}  # type: ignore[arg-type]
    return section_type(**{k: v for k, v in table.items() if k in known})
