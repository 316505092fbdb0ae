"""Tests for the MCP server boundary (server/mcp_server.py).

The tool service runs against a recording spy, so no process is ever
spawned.  These tests verify:

* ``list_tools`` advertises six tools with the catalogue schemas.
* Every failure becomes a text result starting with ``Error: ``.
* Failure labels and hints in rendered errors.
* Server wiring from settings.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import mcp.types as types
import pytest

from ytdlp_mcp.config import Settings
from ytdlp_mcp.core.tool_service import ToolService
from ytdlp_mcp.exceptions import (
    InvalidRequestError,
    MalformedMetadataError,
    ProcessFailedError,
    SpawnFailedError,
)
from ytdlp_mcp.infra.process_runner import AsyncProcessRunner
from ytdlp_mcp.server.mcp_server import (
    SERVER_NAME,
    YtdlpMcpServer,
    create_server,
    render_error,
)

URL = "https://www.youtube.com/watch?v=abc123"


def _call(server: YtdlpMcpServer, name: str, arguments: dict[str, Any] | None) -> str:
    contents = asyncio.run(server.call_tool(name, arguments))
    assert len(contents) == 1
    assert isinstance(contents[0], types.TextContent)
    return contents[0].text


class _ExplodingService(ToolService):
    async def invoke(self, name: str, arguments: Any = None) -> str:  # type: ignore[override]
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# list_tools
# ---------------------------------------------------------------------------

class TestListTools:
    def test_six_tools(self, spy_runner) -> None:
        tools = asyncio.run(YtdlpMcpServer(ToolService(spy_runner)).list_tools())
        assert [t.name for t in tools] == [
            "download_video",
            "get_video_info",
            "list_formats",
            "extract_audio",
            "download_playlist",
            "search_and_download",
        ]

    def test_download_video_schema(self, spy_runner) -> None:
        tools = asyncio.run(YtdlpMcpServer(ToolService(spy_runner)).list_tools())
        schema = tools[0].inputSchema
        assert schema["type"] == "object"
        assert schema["required"] == ["url"]
        assert schema["properties"]["quality"]["default"] == "best[height<=720]"
        assert schema["properties"]["audio_only"] == {
            "type": "boolean",
            "description": "Download audio only",
            "default": False,
        }
        assert "default" not in schema["properties"]["output_template"]

    def test_search_schema_requires_query(self, spy_runner) -> None:
        tools = asyncio.run(YtdlpMcpServer(ToolService(spy_runner)).list_tools())
        search = tools[-1].inputSchema
        assert search["required"] == ["search_query"]
        assert search["properties"]["max_results"]["type"] == "number"
        assert search["properties"]["max_results"]["default"] == 1


# ---------------------------------------------------------------------------
# call_tool
# ---------------------------------------------------------------------------

class TestCallTool:
    def test_success_text(self, spy_runner) -> None:
        text = _call(YtdlpMcpServer(ToolService(spy_runner)), "download_video", {"url": URL})
        assert text.startswith("✅ Download completed successfully!")

    def test_missing_url_is_error_text(self, spy_runner) -> None:
        text = _call(YtdlpMcpServer(ToolService(spy_runner)), "download_video", {})
        assert text == "Error: download_video: missing required parameter 'url'"
        assert spy_runner.calls == []

    def test_none_arguments(self, spy_runner) -> None:
        text = _call(YtdlpMcpServer(ToolService(spy_runner)), "list_formats", None)
        assert text.startswith("Error: list_formats: missing required parameter 'url'")

    def test_unknown_tool(self, spy_runner) -> None:
        text = _call(YtdlpMcpServer(ToolService(spy_runner)), "nope", {})
        assert text.startswith("Error: Unknown tool: nope")

    def test_process_failure_labelled(self, runner_factory) -> None:
        runner = runner_factory(error=ProcessFailedError(1, "ERROR: Video unavailable"))
        text = _call(YtdlpMcpServer(ToolService(runner)), "download_video", {"url": URL})
        assert text == (
            "Error: Download failed: yt-dlp exited with code 1: ERROR: Video unavailable"
        )

    def test_spawn_failure_includes_hint(self, runner_factory) -> None:
        runner = runner_factory(
            error=SpawnFailedError("Failed to start yt-dlp", hint="Install yt-dlp"),
        )
        text = _call(YtdlpMcpServer(ToolService(runner)), "extract_audio", {"url": URL})
        assert text.startswith("Error: Audio extraction failed: Failed to start yt-dlp")
        assert text.endswith("\nHint: Install yt-dlp")

    def test_malformed_metadata_labelled(self, runner_factory) -> None:
        text = _call(
            YtdlpMcpServer(ToolService(runner_factory("garbage"))),
            "get_video_info",
            {"url": URL},
        )
        assert text.startswith("Error: Failed to get video info: yt-dlp output is not valid JSON")

    def test_unexpected_exception_never_escapes(self, spy_runner) -> None:
        text = _call(YtdlpMcpServer(_ExplodingService(spy_runner)), "list_formats", {"url": URL})
        assert text == "Error: Unexpected RuntimeError: boom"

    def test_real_runner_missing_binary(self, tmp_path: Path) -> None:
        runner = AsyncProcessRunner(str(tmp_path / "missing-yt-dlp"), tmp_path)
        text = _call(YtdlpMcpServer(ToolService(runner)), "list_formats", {"url": URL})
        assert text.startswith("Error: Failed to list formats: Failed to start")


# ---------------------------------------------------------------------------
# render_error
# ---------------------------------------------------------------------------

class TestRenderError:
    def test_invalid_request_not_labelled(self) -> None:
        assert render_error(InvalidRequestError("bad"), "download_video") == "Error: bad"

    def test_without_operation(self) -> None:
        assert render_error(MalformedMetadataError("x")) == "Error: x"

    @pytest.mark.parametrize(
        ("operation", "label"),
        [
            ("download_playlist", "Playlist download failed"),
            ("search_and_download", "Search and download failed"),
        ],
    )
    def test_labels(self, operation: str, label: str) -> None:
        text = render_error(ProcessFailedError(2, "e"), operation)
        assert text == f"Error: {label}: yt-dlp exited with code 2: e"


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

class TestCreateServer:
    def test_builds_server(self, tmp_path: Path) -> None:
        server = create_server(Settings(ytdlp_path="yt-dlp", download_dir=tmp_path))
        assert isinstance(server, YtdlpMcpServer)
        assert server.server.name == SERVER_NAME


# ---------------------------------------------------------------------------
# Handlers registered on the SDK server
# ---------------------------------------------------------------------------

class TestRegisteredHandlers:
    def test_installed_sdk_is_1x(self) -> None:
        from importlib.metadata import version

        assert int(version("mcp").split(".")[0]) == 1

    def test_list_tools_request(self, spy_runner) -> None:
        server = YtdlpMcpServer(ToolService(spy_runner))
        handler = server.server.request_handlers[types.ListToolsRequest]
        result = asyncio.run(handler(types.ListToolsRequest(method="tools/list")))
        assert len(result.root.tools) == 6

    @pytest.mark.parametrize(
        ("arguments", "expected"),
        [
            ({"url": 5}, "Error: download_video: parameter 'url' must be a string"),
            ({}, "Error: download_video: missing required parameter 'url'"),
        ],
    )
    def test_call_tool_request_bypasses_schema_validation(
        self, spy_runner, arguments: dict[str, Any], expected: str,
    ) -> None:
        server = YtdlpMcpServer(ToolService(spy_runner))
        handler = server.server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="download_video", arguments=arguments),
        )
        result = asyncio.run(handler(request)).root

        assert result.isError is False
        assert result.content[0].text == expected
        assert spy_runner.calls == []
