"""Infrastructure layer — external system integration.

This layer wraps all interaction with the yt-dlp executable and the
operating system.  Every raw OS exception must be caught here and
re-raised as a :class:`~ytdlp_mcp.exceptions.YtdlpMcpError` subclass.

Rules
-----
* No imports from ``cli`` or ``server``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ytdlp_mcp.infra.binary_detector import (
    BinaryStatus,
    detect_binary,
    detect_ffmpeg,
    detect_ytdlp,
)
from ytdlp_mcp.infra.process_runner import AsyncProcessRunner

__all__: list[str] = [
    "AsyncProcessRunner",
    "BinaryStatus",
    "detect_binary",
    "detect_ffmpeg",
    "detect_ytdlp",
]
