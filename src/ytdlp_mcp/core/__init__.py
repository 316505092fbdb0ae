"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocess, filesystem or network I/O.
* No imports from ``cli``, ``server`` or ``infra``; ``utils`` is allowed
  for logging.
* Argument construction must be fully typed and deterministic.
"""

from ytdlp_mcp.core.argument_builder import build_arguments
from ytdlp_mcp.core.models import (
    DownloadPlaylistRequest,
    DownloadVideoRequest,
    ExtractAudioRequest,
    ListFormatsRequest,
    ProcessResult,
    SearchDownloadRequest,
    VideoInfoRequest,
    VideoMetadata,
)
from ytdlp_mcp.core.operations import OperationSpec, ParamSpec, get_operation, list_operations
from ytdlp_mcp.core.protocols import ProcessRunner
from ytdlp_mcp.core.tool_service import ToolService
from ytdlp_mcp.core.validation import parse_request

__all__: list[str] = [
    "DownloadPlaylistRequest",
    "DownloadVideoRequest",
    "ExtractAudioRequest",
    "ListFormatsRequest",
    "OperationSpec",
    "ParamSpec",
    "ProcessResult",
    "ProcessRunner",
    "SearchDownloadRequest",
    "ToolService",
    "VideoInfoRequest",
    "VideoMetadata",
    "build_arguments",
    "get_operation",
    "list_operations",
    "parse_request",
]
