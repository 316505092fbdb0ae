"""Domain models for ytdlp-mcp.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and live only for the duration of one tool call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_QUALITY: str = "best[height<=720]"
"""Format selector used when a request does not name one."""


# ---------------------------------------------------------------------------
# Operation requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DownloadVideoRequest:
    """Parameters of the ``download_video`` operation."""

    url: str
    quality: str = DEFAULT_QUALITY
    format: str = "best"
    """Merge container; ``"best"`` leaves the container to yt-dlp."""
    audio_only: bool = False
    """When set, *quality* and *format* are ignored and mp3 is extracted."""
    output_template: str | None = None


@dataclass(frozen=True, slots=True)
class VideoInfoRequest:
    """Parameters of the ``get_video_info`` operation."""

    url: str


@dataclass(frozen=True, slots=True)
class ListFormatsRequest:
    """Parameters of the ``list_formats`` operation."""

    url: str


@dataclass(frozen=True, slots=True)
class ExtractAudioRequest:
    """Parameters of the ``extract_audio`` operation."""

    url: str
    audio_format: str = "mp3"
    audio_quality: str = "0"
    """yt-dlp VBR scale, ``"0"`` (best) to ``"9"`` (worst)."""


@dataclass(frozen=True, slots=True)
class DownloadPlaylistRequest:
    """Parameters of the ``download_playlist`` operation."""

    url: str
    quality: str = DEFAULT_QUALITY
    max_downloads: int | None = None
    playlist_start: int = 1
    playlist_end: int | None = None


@dataclass(frozen=True, slots=True)
class SearchDownloadRequest:
    """Parameters of the ``search_and_download`` operation."""

    search_query: str
    max_results: int = 1
    quality: str = DEFAULT_QUALITY


OperationRequest = (
    DownloadVideoRequest
    | VideoInfoRequest
    | ListFormatsRequest
    | ExtractAudioRequest
    | DownloadPlaylistRequest
    | SearchDownloadRequest
)


# ---------------------------------------------------------------------------
# Process result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Captured output of one successful yt-dlp run."""

    stdout: str
    stderr: str
    exit_code: int


# ---------------------------------------------------------------------------
# Video metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoMetadata:
    """Partial metadata parsed from ``yt-dlp --dump-json``.

    Every field is optional; formatters substitute placeholders for the
    missing ones.
    """

    title: str | None = None
    uploader: str | None = None
    duration: int | None = None
    """Duration in seconds."""
    view_count: int | None = None
    upload_date: str | None = None
    """Raw ``YYYYMMDD`` string as reported by yt-dlp."""
    description: str | None = None
    thumbnail: str | None = None
    webpage_url: str | None = None
    format_id: str | None = None
    ext: str | None = None
    filesize: int | None = None
    """File size in bytes."""

    @classmethod
    def from_info(cls, info: dict[str, Any]) -> VideoMetadata:
        """Pick the known fields out of a raw info dict."""
        return cls(
            title=_opt_str(info.get("title")),
            uploader=_opt_str(info.get("uploader")),
            duration=_opt_int(info.get("duration")),
            view_count=_opt_int(info.get("view_count")),
            upload_date=_opt_str(info.get("upload_date")),
            description=_opt_str(info.get("description")),
            thumbnail=_opt_str(info.get("thumbnail")),
            webpage_url=_opt_str(info.get("webpage_url")),
            format_id=_opt_str(info.get("format_id")),
            ext=_opt_str(info.get("ext")),
            filesize=_opt_int(info.get("filesize")),
        )


def _opt_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _opt_int(value: object) -> int | None:
    """Convert numeric values to ``int``; anything else becomes ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    return None
