"""Server layer — the MCP protocol surface and per-call error boundary.

It may import from ``core``, ``infra`` and ``utils``; only ``cli``
imports from it.
"""

from ytdlp_mcp.server.mcp_server import YtdlpMcpServer, create_server, render_error

__all__: list[str] = ["YtdlpMcpServer", "create_server", "render_error"]
