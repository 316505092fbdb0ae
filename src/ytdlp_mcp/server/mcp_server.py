"""MCP server exposing the six yt-dlp operations as tools.

This module is the **per-call error boundary**.  ``call_tool`` catches
every exception raised while handling an invocation and turns it into a
normal text result that starts with ``Error: `` — clients such as LLM
agents always receive parseable text, never a protocol-level failure.

Architecture notes
------------------
* No business logic lives here — validation, argument construction and
  formatting are delegated to :class:`~ytdlp_mcp.core.ToolService`.
* The SDK's own JSON Schema input validation is disabled so that bad
  arguments surface through the same ``Error: `` path as every other
  failure.
* stdout belongs to the JSON-RPC stream; all diagnostics are logged to
  stderr.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ytdlp_mcp.config import Settings
from ytdlp_mcp.core.operations import get_operation, list_operations
from ytdlp_mcp.core.tool_service import ToolService
from ytdlp_mcp.exceptions import InvalidRequestError, YtdlpMcpError
from ytdlp_mcp.infra.process_runner import AsyncProcessRunner
from ytdlp_mcp.utils.log import get_logger
from ytdlp_mcp.version import __version__

logger = get_logger(__name__)

SERVER_NAME: str = "yt-dlp-mcp-server"
ERROR_PREFIX: str = "Error: "


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

def render_error(exc: BaseException, operation: str | None = None) -> str:
    """Render *exc* as the text result of a failed tool call.

    Execution failures are prefixed with the operation's failure label
    (``Error: Download failed: ...``); request errors are not, since
    the operation never started.
    """
    if isinstance(exc, YtdlpMcpError):
        message = str(exc)
        if operation is not None and not isinstance(exc, InvalidRequestError):
            message = f"{get_operation(operation).failure_label}: {message}"
        if exc.hint:
            message = f"{message}\nHint: {exc.hint}"
        return ERROR_PREFIX + message
    return f"{ERROR_PREFIX}Unexpected {type(exc).__name__}: {exc}"


def _text(text: str) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------

class YtdlpMcpServer:
    """Binds a :class:`ToolService` to an MCP low-level ``Server``.

    Parameters
    ----------
    service:
        The tool service executing operations.
    name:
        Server name announced during MCP initialisation.
    """

    def __init__(self, service: ToolService, *, name: str = SERVER_NAME) -> None:
        self._service: ToolService = service
        self._server: Server = Server(name, version=__version__)
        self._register_handlers()

    @property
    def server(self) -> Server:
        """The underlying MCP SDK server."""
        return self._server

    # ------------------------------------------------------------------
    # Request handlers
    # ------------------------------------------------------------------

    async def list_tools(self) -> list[types.Tool]:
        """Describe the six operations as MCP tools."""
        return [
            types.Tool(
                name=op.name,
                description=op.description,
                inputSchema=op.input_schema(),
            )
            for op in list_operations()
        ]

    async def call_tool(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> list[types.TextContent]:
        """Invoke operation *name*; never raises."""
        try:
            text = await self._service.invoke(name, arguments)
        except InvalidRequestError as exc:
            logger.info("Rejected %s call: %s", name, exc)
            return _text(render_error(exc))
        except YtdlpMcpError as exc:
            logger.warning("%s failed: %s", name, exc)
            return _text(render_error(exc, name))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error while handling %s", name)
            return _text(render_error(exc, name))
        return _text(text)

    def _register_handlers(self) -> None:
        @self._server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return await self.list_tools()

        @self._server.call_tool(validate_input=False)
        async def _call_tool(
            name: str,
            arguments: dict[str, Any],
        ) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def run_stdio(self) -> None:
        """Serve over stdin/stdout until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("YT-DLP MCP server running on stdio")
            await self._server.run(
                read_stream,
                write_stream,
                self._server.create_initialization_options(),
            )


def create_server(settings: Settings) -> YtdlpMcpServer:
    """Wire settings, process runner, tool service and MCP server together."""
    runner = AsyncProcessRunner(settings.ytdlp_path, settings.download_dir)
    return YtdlpMcpServer(ToolService(runner))
