"""Console logging adapter.

Writes structured log lines to stderr through a private structlog logger.
The global structlog configuration belongs to the host application and is
never touched here; the adapter wraps its own PrintLogger with its own
processor chain and level filter.

- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

The adapter does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(use_json: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """Console logger for the public client.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name that gets rendered.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        min_level = getattr(logging, level.upper(), logging.INFO)
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stderr),
            processors=_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, flattening ``error`` into type and message fields."""
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose lines all carry ``context``."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
