"""Convert raw tool-call arguments into typed operation requests.

Validation happens here, before any argument vector is built and
before any process is spawned.  Every problem is reported as an
:class:`~ytdlp_mcp.exceptions.InvalidRequestError` whose message names
the operation and the offending field.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ytdlp_mcp.core import operations as ops
from ytdlp_mcp.core.models import (
    DEFAULT_QUALITY,
    DownloadPlaylistRequest,
    DownloadVideoRequest,
    ExtractAudioRequest,
    ListFormatsRequest,
    OperationRequest,
    SearchDownloadRequest,
    VideoInfoRequest,
)
from ytdlp_mcp.exceptions import InvalidRequestError


# ---------------------------------------------------------------------------
# Field readers
# ---------------------------------------------------------------------------

def _require_str(operation: str, args: Mapping[str, Any], field: str) -> str:
    value = args.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidRequestError(
            f"{operation}: missing required parameter '{field}'",
        )
    if not isinstance(value, str):
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be a string",
        )
    return value.strip()


def _optional_str(
    operation: str,
    args: Mapping[str, Any],
    field: str,
    default: str | None,
) -> str | None:
    value = args.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be a string",
        )
    return value if value.strip() else default


def _optional_bool(
    operation: str,
    args: Mapping[str, Any],
    field: str,
    default: bool,
) -> bool:
    value = args.get(field)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be a boolean",
        )
    return value


def _optional_int(
    operation: str,
    args: Mapping[str, Any],
    field: str,
    default: int | None,
) -> int | None:
    """Read a positive integer; JSON numbers may arrive as integral floats."""
    value = args.get(field)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be a number",
        )
    if isinstance(value, float) and not value.is_integer():
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be a whole number",
        )
    number = int(value)
    if number < 1:
        raise InvalidRequestError(
            f"{operation}: parameter '{field}' must be at least 1",
        )
    return number


# ---------------------------------------------------------------------------
# Per-operation parsers
# ---------------------------------------------------------------------------

def _download_video(args: Mapping[str, Any]) -> DownloadVideoRequest:
    name = ops.DOWNLOAD_VIDEO
    return DownloadVideoRequest(
        url=_require_str(name, args, "url"),
        quality=_optional_str(name, args, "quality", DEFAULT_QUALITY) or DEFAULT_QUALITY,
        format=_optional_str(name, args, "format", "best") or "best",
        audio_only=_optional_bool(name, args, "audio_only", False),
        output_template=_optional_str(name, args, "output_template", None),
    )


def _video_info(args: Mapping[str, Any]) -> VideoInfoRequest:
    return VideoInfoRequest(url=_require_str(ops.GET_VIDEO_INFO, args, "url"))


def _list_formats(args: Mapping[str, Any]) -> ListFormatsRequest:
    return ListFormatsRequest(url=_require_str(ops.LIST_FORMATS, args, "url"))


def _extract_audio(args: Mapping[str, Any]) -> ExtractAudioRequest:
    name = ops.EXTRACT_AUDIO
    return ExtractAudioRequest(
        url=_require_str(name, args, "url"),
        audio_format=_optional_str(name, args, "audio_format", "mp3") or "mp3",
        audio_quality=_optional_str(name, args, "audio_quality", "0") or "0",
    )


def _download_playlist(args: Mapping[str, Any]) -> DownloadPlaylistRequest:
    name = ops.DOWNLOAD_PLAYLIST
    return DownloadPlaylistRequest(
        url=_require_str(name, args, "url"),
        quality=_optional_str(name, args, "quality", DEFAULT_QUALITY) or DEFAULT_QUALITY,
        max_downloads=_optional_int(name, args, "max_downloads", None),
        playlist_start=_optional_int(name, args, "playlist_start", 1) or 1,
        playlist_end=_optional_int(name, args, "playlist_end", None),
    )


def _search_and_download(args: Mapping[str, Any]) -> SearchDownloadRequest:
    name = ops.SEARCH_AND_DOWNLOAD
    return SearchDownloadRequest(
        search_query=_require_str(name, args, "search_query"),
        max_results=_optional_int(name, args, "max_results", 1) or 1,
        quality=_optional_str(name, args, "quality", DEFAULT_QUALITY) or DEFAULT_QUALITY,
    )


_PARSERS: dict[str, Callable[[Mapping[str, Any]], OperationRequest]] = {
    ops.DOWNLOAD_VIDEO: _download_video,
    ops.GET_VIDEO_INFO: _video_info,
    ops.LIST_FORMATS: _list_formats,
    ops.EXTRACT_AUDIO: _extract_audio,
    ops.DOWNLOAD_PLAYLIST: _download_playlist,
    ops.SEARCH_AND_DOWNLOAD: _search_and_download,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_request(
    operation: str,
    arguments: Mapping[str, Any] | None,
) -> OperationRequest:
    """Validate *arguments* for *operation* and return the typed request.

    Unknown extra keys are ignored.

    Raises
    ------
    UnknownOperationError
        If *operation* is not a known operation name.
    InvalidRequestError
        If a required field is missing or any field has the wrong type.
    """
    ops.get_operation(operation)
    return _PARSERS[operation](arguments or {})
