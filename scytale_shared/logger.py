"""
Scytale Structured Logger
==========================

Provides :class:`ScytaleLogger`, a thin facade over :mod:`logging` that
sends colour-coded Rich output to stderr and, when a log file is set,
appends plain-text or JSON-lines records to a rotating file.

Records carry the component name and, inside an
:meth:`ScytaleLogger.operation` block, the name of the running operation
(``encrypt``, ``brute_force``, ``crib_drag`` ...).  Extra keyword
arguments passed to a log call travel in the record's ``context``.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_STDLIB_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message,
    component, operation and (if any) context."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
            "operation": getattr(record, "operation", None),
        }
        context = getattr(record, "context", None)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _rich_handler(level: int) -> RichHandler:
    theme = Theme({
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    })
    return RichHandler(
        level=level,
        console=Console(theme=theme, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONLinesFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    return handler


class ScytaleLogger:
    """Context-aware logger for one Scytale component.

    Usage::

        log = ScytaleLogger("engine", log_file="scytale.log", json_logs=True)
        with log.operation("crib_drag"):
            log.info("Dragging crib %s", crib, offsets=12)

    Args:
        component:      Component name; the stdlib logger is ``scytale.<component>``.
        log_level:      Minimum severity name, e.g. ``"WARNING"``.
        log_file:       Rotating log file, or ``None`` for no file output.
        json_logs:      Write JSON lines instead of text to the log file.
        max_bytes:      Size at which the log file rotates (10 MiB).
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        self._component = component
        self._operation: str | None = None
        self._logger = logging.getLogger(f"scytale.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # A fresh engine replaces the handlers of an earlier one
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_output:
            self._logger.addHandler(_rich_handler(level))
        if log_file is not None:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[ScytaleLogger]:
        """Tag every record logged inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the start (DEBUG) and the elapsed time (INFO) of a block.

        Usage::

            with log.timed("crib drag over 40 letters"):
                result = analyzer.analyze(ciphertext, crib)
        """
        start = time.perf_counter()
        self.debug("Started: %s", label)
        yield
        self.info("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _STDLIB_KWARGS}
        extra = {
            "component": self._component,
            "operation": self._operation,
            "context": kwargs,
        }
        passthrough.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        """The wrapped stdlib :class:`logging.Logger`."""
        return self._logger
