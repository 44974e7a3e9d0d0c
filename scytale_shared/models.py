"""
Scytale Data Models
====================

Pydantic v2 models shared by the cipher engines, the cryptanalysis
engines and the output layer.  A :class:`Candidate` is one
(key, decrypted-text) pair proposed by a cryptanalysis engine; an
:class:`AnalysisResult` bundles the candidates of one run with timing
and metadata for display and report generation.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ========================== Enumerations ===================================


class CipherFamily(str, Enum):
    """The four supported classical cipher families.

    Attributes:
        ADDITIVE:       Caesar shift, ``C = P + k``.
        MULTIPLICATIVE: ``C = P * k``.
        AFFINE:         ``C = a * P + b``.
        HILL_DIGRAPH:   2x2 Hill cipher over letter pairs.
    """

    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"
    AFFINE = "affine"
    HILL_DIGRAPH = "hill"

    @property
    def label(self) -> str:
        """Human-readable family name."""
        _map = {
            "additive": "Additive (Caesar)",
            "multiplicative": "Multiplicative",
            "affine": "Affine",
            "hill": "Hill Digraph",
        }
        return _map[self.value]

    @property
    def key_arity(self) -> int:
        """Number of integers making up a key of this family."""
        return {"additive": 1, "multiplicative": 1, "affine": 2, "hill": 4}[self.value]

    @classmethod
    def parse(cls, name: str) -> CipherFamily:
        """Resolve a family from its value or a common alias.

        Raises:
            ValueError: If *name* names no known family.
        """
        aliases = {
            "caesar": cls.ADDITIVE,
            "shift": cls.ADDITIVE,
            "hill-digraph": cls.HILL_DIGRAPH,
            "hill_digraph": cls.HILL_DIGRAPH,
        }
        key = name.strip().lower()
        if key in aliases:
            return aliases[key]
        return cls(key)


# ========================== Core Models ====================================


class Candidate(BaseModel):
    """A candidate key together with the plaintext it produces.

    Candidates are immutable and never ranked; the human reader picks the
    linguistically sensible one.

    Attributes:
        family:    Cipher family the key belongs to.
        key:       Key integers: ``(shift,)``, ``(factor,)``, ``(a, b)`` or
                   ``(a, b, c, d)``.
        plaintext: Decryption of the full ciphertext under *key*.
        offset:    Crib-drag only -- ciphertext offset where the crib matched.
    """

    model_config = ConfigDict(frozen=True)

    family: CipherFamily
    key: tuple[int, ...]
    plaintext: str
    offset: Optional[int] = None

    @property
    def key_label(self) -> str:
        """Key rendered the way the CLI accepts it, e.g. ``"5,3,9,6"``."""
        return ",".join(str(k) for k in self.key)


class AnalysisResult(BaseModel):
    """Aggregated result of a single Scytale operation.

    This is the top-level output model emitted by
    :class:`scytale.core.engine.ScytaleEngine`.

    Attributes:
        tool_name:  Tool name (``"scytale"``).
        operation:  Operation performed (``encrypt``, ``brute_force`` ...).
        family:     Cipher family involved.
        target:     Preview of the input text.
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation ended.
        output:     Encrypted/decrypted text for cipher operations.
        candidates: Candidate keys for cryptanalysis operations.
        summary:    Human-readable summary text.
        metadata:   Operation-specific extra data.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    tool_name: str = Field(default="scytale", min_length=1)
    operation: str = Field(..., min_length=1)
    family: Optional[CipherFamily] = None
    target: str = Field(default="")
    start_time: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )
    end_time: Optional[_dt.datetime] = None
    output: str = ""
    candidates: list[Candidate] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("target", mode="before")
    @classmethod
    def _preview_target(cls, v: Any) -> str:
        """Truncate long inputs to a 64-character preview."""
        text = str(v)
        return text[:64] + ("..." if len(text) > 64 else "")

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def candidate_count(self) -> int:
        return len(self.candidates)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def finalize(self, summary: str | None = None) -> AnalysisResult:
        """Set *end_time* and *summary*; a default summary counts candidates.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _dt.datetime.now(_dt.timezone.utc)
        if summary is not None:
            self.summary = summary
        elif not self.summary:
            self.summary = (
                f"{self.operation} complete. "
                f"Candidates: {self.candidate_count}"
            )
        return self
