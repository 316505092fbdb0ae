"""Shared utilities — logging setup and cross-cutting concerns.

Rules
-----
* No business logic.
* No imports from ``core``, ``infra``, ``server`` or ``cli``.
* Importable by any layer.
"""

from ytdlp_mcp.utils.log import configure_logging, get_logger

__all__: list[str] = ["configure_logging", "get_logger"]
