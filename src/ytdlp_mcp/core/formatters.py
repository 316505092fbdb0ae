"""Turn captured yt-dlp output into the text returned to MCP clients.

Pure transforms — no I/O.  :func:`format_video_info` is the only
formatter that interprets stdout; the others embed it verbatim.
"""

from __future__ import annotations

import json

from ytdlp_mcp.core.models import VideoMetadata
from ytdlp_mcp.exceptions import MalformedMetadataError, append_ytdlp_upgrade_suggestion

PLACEHOLDER: str = "N/A"
DESCRIPTION_LIMIT: int = 200
ELLIPSIS: str = "..."


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def format_duration(seconds: int | None) -> str:
    """Render seconds as ``m:ss``; hours are folded into minutes."""
    if seconds is None:
        return PLACEHOLDER
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_count(value: int | None) -> str:
    """Render an integer with thousands separators (``1,234,567``)."""
    if value is None:
        return PLACEHOLDER
    return f"{value:,}"


def truncate_description(text: str | None, limit: int = DESCRIPTION_LIMIT) -> str:
    if text is None:
        return PLACEHOLDER
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def _text(value: str | None) -> str:
    return value if value is not None else PLACEHOLDER


# ---------------------------------------------------------------------------
# Metadata parsing
# ---------------------------------------------------------------------------

def parse_video_metadata(stdout: str) -> VideoMetadata:
    """Parse ``--dump-json`` output into :class:`VideoMetadata`.

    Raises
    ------
    MalformedMetadataError
        If *stdout* is not a single JSON object.
    """
    try:
        info = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise MalformedMetadataError(
            f"yt-dlp output is not valid JSON: {exc.msg} (line {exc.lineno})",
            hint=append_ytdlp_upgrade_suggestion(
                "The URL may point to a playlist; use a single-video URL.",
            ),
        ) from exc

    if not isinstance(info, dict):
        raise MalformedMetadataError(
            f"yt-dlp returned JSON {type(info).__name__}, expected an object.",
        )
    return VideoMetadata.from_info(info)


# ---------------------------------------------------------------------------
# Per-operation formatters
# ---------------------------------------------------------------------------

def format_download(stdout: str) -> str:
    return f"✅ Download completed successfully!\n\nOutput:\n{stdout}"


def format_audio_extraction(stdout: str) -> str:
    return f"🎵 Audio extraction completed!\n\nOutput:\n{stdout}"


def format_playlist_download(stdout: str) -> str:
    return f"📂 Playlist download completed!\n\nOutput:\n{stdout}"


def format_search_download(stdout: str, search_query: str, max_results: int) -> str:
    return (
        "🔍 Search and download completed!\n\n"
        f'Search query: "{search_query}"\n'
        f"Max results: {max_results}\n\n"
        f"Output:\n{stdout}"
    )


def format_formats_listing(stdout: str) -> str:
    """Wrap the ``-F`` table in a literal block."""
    body = stdout if stdout.endswith("\n") else stdout + "\n"
    return f"📋 **Available Formats**\n\n```\n{body}```"


def format_video_info(stdout: str) -> str:
    """Parse and render the ``--dump-json`` output of ``get_video_info``.

    Raises
    ------
    MalformedMetadataError
        If *stdout* is not a single JSON object.
    """
    meta = parse_video_metadata(stdout)

    if meta.format_id is None and meta.ext is None:
        format_line = PLACEHOLDER
    else:
        format_line = f"{_text(meta.format_id)} ({_text(meta.ext)})"
    size_line = (
        PLACEHOLDER if meta.filesize is None else f"{format_count(meta.filesize)} bytes"
    )

    lines = [
        "📹 **Video Information**",
        "",
        f"**Title:** {_text(meta.title)}",
        f"**Uploader:** {_text(meta.uploader)}",
        f"**Duration:** {format_duration(meta.duration)}",
        f"**Views:** {format_count(meta.view_count)}",
        f"**Upload Date:** {_text(meta.upload_date)}",
        f"**Description:** {truncate_description(meta.description)}",
        f"**Thumbnail:** {_text(meta.thumbnail)}",
        f"**URL:** {_text(meta.webpage_url)}",
        f"**Format:** {format_line}",
        f"**File Size:** {size_line}",
    ]
    return "\n".join(lines)
