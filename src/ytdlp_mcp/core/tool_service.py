"""Core tool service — orchestrates one operation end to end.

This service delegates process execution to a
:class:`~ytdlp_mcp.core.protocols.ProcessRunner` injected at
construction time.  It is responsible for:

* Validating raw arguments into a typed request.
* Building the yt-dlp argument vector.
* Delegating to the runner.
* Formatting the captured output for the caller.

Guarantees
----------
* Pure orchestration — no subprocess, no filesystem access.
* Nothing is spawned when validation fails.
* Only :class:`~ytdlp_mcp.exceptions.YtdlpMcpError` subclasses escape
  for expected failures; the MCP layer converts them into text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ytdlp_mcp.core import formatters
from ytdlp_mcp.core.argument_builder import build_arguments
from ytdlp_mcp.core.models import (
    DownloadPlaylistRequest,
    DownloadVideoRequest,
    ExtractAudioRequest,
    ListFormatsRequest,
    OperationRequest,
    SearchDownloadRequest,
    VideoInfoRequest,
)
from ytdlp_mcp.core.operations import OperationSpec, list_operations
from ytdlp_mcp.core.protocols import ProcessRunner
from ytdlp_mcp.core.validation import parse_request
from ytdlp_mcp.utils.log import get_logger

logger = get_logger(__name__)


class ToolService:
    """Stateless service that executes the six operations.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner: ProcessRunner = runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def operations() -> tuple[OperationSpec, ...]:
        """Return the operation catalogue."""
        return list_operations()

    async def invoke(
        self,
        name: str,
        arguments: Mapping[str, Any] | None = None,
    ) -> str:
        """Run operation *name* with *arguments* and return its text result.

        Raises
        ------
        UnknownOperationError
            If *name* is not a known operation.
        InvalidRequestError
            If the arguments fail validation (nothing is spawned).
        SpawnFailedError
            If yt-dlp cannot be started.
        ProcessFailedError
            If yt-dlp exits non-zero.
        MalformedMetadataError
            If ``get_video_info`` output is not a JSON object.
        """
        request = parse_request(name, arguments)
        return await self.execute(request)

    async def execute(self, request: OperationRequest) -> str:
        """Run an already-validated *request*."""
        argv = build_arguments(request)
        logger.info("Running %s", type(request).__name__)
        logger.debug("yt-dlp arguments: %s", argv)

        result = await self._runner.run(argv)
        return self._format(request, result.stdout)

    # ------------------------------------------------------------------
    # Output formatting
    # ------------------------------------------------------------------

    @staticmethod
    def _format(request: OperationRequest, stdout: str) -> str:
        if isinstance(request, DownloadVideoRequest):
            return formatters.format_download(stdout)
        if isinstance(request, VideoInfoRequest):
            return formatters.format_video_info(stdout)
        if isinstance(request, ListFormatsRequest):
            return formatters.format_formats_listing(stdout)
        if isinstance(request, ExtractAudioRequest):
            return formatters.format_audio_extraction(stdout)
        if isinstance(request, DownloadPlaylistRequest):
            return formatters.format_playlist_download(stdout)
        if isinstance(request, SearchDownloadRequest):
            return formatters.format_search_download(
                stdout, request.search_query, request.max_results,
            )
        raise TypeError(f"Unsupported request type: {type(request).__name__}")
