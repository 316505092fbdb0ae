"""Logging setup for ytdlp-mcp.

stdout carries the JSON-RPC stream of the MCP transport, so every log
record goes to stderr.  Rich renders the records when it is installed;
otherwise a plain stream handler is used, mirroring the console
fallback in :mod:`ytdlp_mcp.cli.console`.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME: str = "ytdlp_mcp"

_HANDLER: logging.Handler | None = None
"""The handler installed by :func:`configure_logging`, once it has run."""


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stderr handler."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"),
        )
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once only updates the level.  Unknown level
    names fall back to ``INFO``.
    """
    global _HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logger.setLevel(level)

    if _HANDLER is None:
        _HANDLER = _build_handler()
        logger.addHandler(_HANDLER)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for module *name*."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
