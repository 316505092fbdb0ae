"""Allow ``python -m ytdlp_mcp`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ytdlp_mcp`` behaves identically to the ``ytdlp-mcp``
console script.
"""

from __future__ import annotations

from ytdlp_mcp.cli.app import cli

if __name__ == "__main__":
    cli()
