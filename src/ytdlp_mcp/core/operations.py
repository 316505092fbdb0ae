"""Catalogue of the six operations exposed as MCP tools.

Each :class:`OperationSpec` carries the name, the description shown to
clients, the parameter table, and the label prefixed to execution
failures.  The JSON Schema advertised by ``list_tools`` is derived from
the parameter table so the two can never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ytdlp_mcp.core.models import DEFAULT_QUALITY
from ytdlp_mcp.exceptions import UnknownOperationError

DOWNLOAD_VIDEO: str = "download_video"
GET_VIDEO_INFO: str = "get_video_info"
LIST_FORMATS: str = "list_formats"
EXTRACT_AUDIO: str = "extract_audio"
DOWNLOAD_PLAYLIST: str = "download_playlist"
SEARCH_AND_DOWNLOAD: str = "search_and_download"


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """One named parameter of an operation."""

    name: str
    type: str
    """JSON Schema type: ``string``, ``boolean`` or ``number``."""
    description: str
    required: bool = False
    default: Any = None

    def schema(self) -> dict[str, Any]:
        prop: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            prop["default"] = self.default
        return prop


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """Static description of one operation."""

    name: str
    description: str
    params: tuple[ParamSpec, ...]
    failure_label: str

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params if p.required)

    def input_schema(self) -> dict[str, Any]:
        """Render the parameter table as a JSON Schema object."""
        return {
            "type": "object",
            "properties": {p.name: p.schema() for p in self.params},
            "required": list(self.required),
        }


def _quality_param(description: str = "Video quality preference") -> ParamSpec:
    return ParamSpec("quality", "string", description, default=DEFAULT_QUALITY)


OPERATIONS: tuple[OperationSpec, ...] = (
    OperationSpec(
        name=DOWNLOAD_VIDEO,
        description="Download a video from YouTube or other supported sites",
        params=(
            ParamSpec("url", "string", "The URL of the video to download", required=True),
            _quality_param(
                "Video quality preference (e.g., 'best', 'best[height<=720]', 'worst')",
            ),
            ParamSpec(
                "format", "string",
                "Output format (e.g., 'mp4', 'webm', 'best')",
                default="best",
            ),
            ParamSpec("audio_only", "boolean", "Download audio only", default=False),
            ParamSpec("output_template", "string", "Custom output filename template"),
        ),
        failure_label="Download failed",
    ),
    OperationSpec(
        name=GET_VIDEO_INFO,
        description="Get information about a video without downloading",
        params=(
            ParamSpec("url", "string", "The URL of the video to get info for", required=True),
        ),
        failure_label="Failed to get video info",
    ),
    OperationSpec(
        name=LIST_FORMATS,
        description="List available formats for a video",
        params=(
            ParamSpec(
                "url", "string", "The URL of the video to list formats for", required=True,
            ),
        ),
        failure_label="Failed to list formats",
    ),
    OperationSpec(
        name=EXTRACT_AUDIO,
        description="Extract audio from a video URL",
        params=(
            ParamSpec(
                "url", "string", "The URL of the video to extract audio from", required=True,
            ),
            ParamSpec(
                "audio_format", "string", "Audio format (mp3, aac, wav, etc.)", default="mp3",
            ),
            ParamSpec(
                "audio_quality", "string", "Audio quality (0-9, where 0 is best)", default="0",
            ),
        ),
        failure_label="Audio extraction failed",
    ),
    OperationSpec(
        name=DOWNLOAD_PLAYLIST,
        description="Download an entire playlist",
        params=(
            ParamSpec("url", "string", "The URL of the playlist to download", required=True),
            _quality_param(),
            ParamSpec("max_downloads", "number", "Maximum number of videos to download"),
            ParamSpec(
                "playlist_start", "number",
                "Start downloading from this video number",
                default=1,
            ),
            ParamSpec("playlist_end", "number", "Stop downloading at this video number"),
        ),
        failure_label="Playlist download failed",
    ),
    OperationSpec(
        name=SEARCH_AND_DOWNLOAD,
        description="Search for videos and download them",
        params=(
            ParamSpec("search_query", "string", "Search query for videos", required=True),
            ParamSpec(
                "max_results", "number",
                "Maximum number of search results to download",
                default=1,
            ),
            _quality_param(),
        ),
        failure_label="Search and download failed",
    ),
)

_BY_NAME: dict[str, OperationSpec] = {op.name: op for op in OPERATIONS}


def list_operations() -> tuple[OperationSpec, ...]:
    """Return every operation in advertisement order."""
    return OPERATIONS


def get_operation(name: str) -> OperationSpec:
    """Look up an operation by name.

    Raises
    ------
    UnknownOperationError
        If *name* is not one of the six operations.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownOperationError(
            f"Unknown tool: {name}",
            hint="Available tools: " + ", ".join(_BY_NAME),
        ) from None
