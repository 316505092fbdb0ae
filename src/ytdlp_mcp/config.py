"""Process-wide settings resolved once at startup.

The executable path and download directory are read from the
environment with platform-appropriate fallbacks:

* ``YT_DLP_PATH`` — yt-dlp executable.  Defaults to whatever
  :func:`shutil.which` finds on ``PATH``, else the bare name ``yt-dlp``
  (the spawn then fails with a typed error if it is truly absent).
* ``DOWNLOAD_DIR`` — working directory for the child process.
  Defaults to ``~/Downloads``.
* ``YTDLP_MCP_LOG_LEVEL`` — logging level name.  Defaults to ``INFO``.

Settings are immutable after construction; nothing in the project
mutates them.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

YTDLP_PATH_ENV: str = "YT_DLP_PATH"
DOWNLOAD_DIR_ENV: str = "DOWNLOAD_DIR"
LOG_LEVEL_ENV: str = "YTDLP_MCP_LOG_LEVEL"

YTDLP_EXECUTABLE_NAME: str = "yt-dlp"
DEFAULT_LOG_LEVEL: str = "INFO"


def default_download_dir() -> Path:
    """Return the OS-standard download directory (``~/Downloads``)."""
    return Path.home() / "Downloads"


def default_ytdlp_path() -> str:
    """Locate yt-dlp on ``PATH``, falling back to the bare executable name."""
    found = shutil.which(YTDLP_EXECUTABLE_NAME)
    return found if found is not None else YTDLP_EXECUTABLE_NAME


def _env_value(env: Mapping[str, str], key: str) -> str | None:
    """Return a stripped env value, treating blank strings as unset."""
    value = env.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    """Read-only runtime configuration shared by every tool call."""

    ytdlp_path: str
    """Executable spawned for every operation."""

    download_dir: Path
    """Working directory of the child process; downloads land here."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Logging level name for the ``ytdlp_mcp`` logger."""

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *env* (defaults to :data:`os.environ`)."""
        source: Mapping[str, str] = os.environ if env is None else env

        raw_path = _env_value(source, YTDLP_PATH_ENV)
        ytdlp_path = (
            str(Path(raw_path).expanduser()) if raw_path is not None
            else default_ytdlp_path()
        )

        raw_dir = _env_value(source, DOWNLOAD_DIR_ENV)
        download_dir = (
            Path(raw_dir).expanduser() if raw_dir is not None
            else default_download_dir()
        )

        log_level = (_env_value(source, LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

        return cls(
            ytdlp_path=ytdlp_path,
            download_dir=download_dir,
            log_level=log_level,
        )
