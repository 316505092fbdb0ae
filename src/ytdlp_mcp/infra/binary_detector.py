"""Infrastructure: external executable detection and platform guidance.

This module locates the two executables the server relies on — the
configured yt-dlp binary and ffmpeg (needed by yt-dlp for audio
extraction and stream merging) — and provides platform-specific
installation guidance when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No permanent PATH modification.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryStatus:
    """Result of an executable detection probe.

    Attributes
    ----------
    name : str
        The executable that was probed (``yt-dlp``, ``ffmpeg``, or a path).
    found : bool
        Whether the executable was located.
    path : Path | None
        Absolute path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when it is already present.
    """

    name: str
    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_binary(executable: str, tool: str) -> BinaryStatus:
    """Probe for *executable* (a bare name or a path).

    *tool* selects the install guidance (``"yt-dlp"`` or ``"ffmpeg"``).
    Returns a :class:`BinaryStatus` regardless of the outcome — the
    caller decides whether to abort or merely warn.
    """
    result = shutil.which(executable)

    if result is not None:
        resolved = Path(result).resolve()
        return BinaryStatus(
            name=executable,
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return BinaryStatus(
        name=executable,
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(tool),
    )


def detect_ytdlp(executable: str) -> BinaryStatus:
    """Probe for the configured yt-dlp executable."""
    return detect_binary(executable, "yt-dlp")


def detect_ffmpeg() -> BinaryStatus:
    """Probe the system PATH for ffmpeg."""
    return detect_binary("ffmpeg", "ffmpeg")


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(tool: str) -> tuple[str, ...]:
    """Return install commands for *tool* appropriate for the current OS."""
    system = platform.system().lower()
    if tool == "yt-dlp":
        if system == "windows":
            return ("winget install yt-dlp", "pip install yt-dlp")
        if system == "darwin":
            return ("brew install yt-dlp", "pip install yt-dlp")
        return ("pip install yt-dlp", "pipx install yt-dlp")

    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    # Fallback — generic guidance.
    return ("Please install ffmpeg from https://ffmpeg.org/download.html",)
