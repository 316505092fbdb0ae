"""Pure mapping from operation requests to yt-dlp argument vectors.

Every function here is deterministic: the argument vector depends only
on the request it is given.  No I/O, no executable path, no working
directory — those belong to the process runner.

Order matters: yt-dlp is flag-sensitive and the URL (or search
pseudo-URL) is always the final positional token.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ytdlp_mcp.core.models import (
    DownloadPlaylistRequest,
    DownloadVideoRequest,
    ExtractAudioRequest,
    ListFormatsRequest,
    OperationRequest,
    SearchDownloadRequest,
    VideoInfoRequest,
)

BEST_AUDIO: str = "bestaudio"
AUDIO_ONLY_FORMAT: str = "mp3"


def search_url(query: str, max_results: int) -> str:
    """Return the ``ytsearch<N>:<query>`` pseudo-URL understood by yt-dlp."""
    return f"ytsearch{max_results}:{query}"


# ---------------------------------------------------------------------------
# Per-operation builders
# ---------------------------------------------------------------------------

def download_video_args(request: DownloadVideoRequest) -> list[str]:
    args: list[str] = []
    if request.audio_only:
        args += ["-f", BEST_AUDIO, "--extract-audio", "--audio-format", AUDIO_ONLY_FORMAT]
    else:
        args += ["-f", request.quality]
        if request.format != "best":
            args += ["--merge-output-format", request.format]
    if request.output_template:
        args += ["-o", request.output_template]
    args.append(request.url)
    return args


def video_info_args(request: VideoInfoRequest) -> list[str]:
    return ["--dump-json", request.url]


def list_formats_args(request: ListFormatsRequest) -> list[str]:
    return ["-F", request.url]


def extract_audio_args(request: ExtractAudioRequest) -> list[str]:
    return [
        "-f", BEST_AUDIO,
        "--extract-audio",
        "--audio-format", request.audio_format,
        "--audio-quality", request.audio_quality,
        request.url,
    ]


def download_playlist_args(request: DownloadPlaylistRequest) -> list[str]:
    args = ["-f", request.quality]
    if request.max_downloads is not None:
        args += ["--max-downloads", str(request.max_downloads)]
    # 1 is yt-dlp's own default, so the flag is only needed past it.
    if request.playlist_start > 1:
        args += ["--playlist-start", str(request.playlist_start)]
    if request.playlist_end is not None:
        args += ["--playlist-end", str(request.playlist_end)]
    args.append(request.url)
    return args


def search_and_download_args(request: SearchDownloadRequest) -> list[str]:
    return [
        "-f", request.quality,
        "--max-downloads", str(request.max_results),
        search_url(request.search_query, request.max_results),
    ]


_BUILDERS: dict[type[Any], Callable[[Any], list[str]]] = {
    DownloadVideoRequest: download_video_args,
    VideoInfoRequest: video_info_args,
    ListFormatsRequest: list_formats_args,
    ExtractAudioRequest: extract_audio_args,
    DownloadPlaylistRequest: download_playlist_args,
    SearchDownloadRequest: search_and_download_args,
}


def build_arguments(request: OperationRequest) -> list[str]:
    """Return a fresh argument vector for *request*.

    Raises
    ------
    TypeError
        If *request* is not one of the operation request types.
    """
    builder = _BUILDERS.get(type(request))
    if builder is None:
        raise TypeError(f"Unsupported request type: {type(request).__name__}")
    return builder(request)
