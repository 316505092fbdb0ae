"""Process exit codes returned by ``ytdlp-mcp``.

Only the process boundary in :mod:`ytdlp_mcp.cli.app` and the
``doctor`` command return these; tool-call failures never end the
process.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The stdio session ended normally, or every doctor check passed."""

GENERAL_ERROR: int = 1
"""A YtdlpMcpError reached the process boundary, or a doctor check failed."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the process boundary."""
