"""Tests for runtime settings (config.py).

Environments are passed explicitly — ``os.environ`` is never read.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from ytdlp_mcp.config import (
    Settings,
    default_download_dir,
    default_ytdlp_path,
)


class TestDefaults:
    @patch("ytdlp_mcp.config.shutil.which", return_value="/usr/local/bin/yt-dlp")
    def test_ytdlp_found_on_path(self, _mock_which: object) -> None:
        assert default_ytdlp_path() == "/usr/local/bin/yt-dlp"

    @patch("ytdlp_mcp.config.shutil.which", return_value=None)
    def test_ytdlp_falls_back_to_bare_name(self, _mock_which: object) -> None:
        assert default_ytdlp_path() == "yt-dlp"

    def test_download_dir_is_home_downloads(self) -> None:
        assert default_download_dir() == Path.home() / "Downloads"


class TestFromEnv:
    @patch("ytdlp_mcp.config.shutil.which", return_value=None)
    def test_empty_env_uses_defaults(self, _mock_which: object) -> None:
        settings = Settings.from_env({})
        assert settings.ytdlp_path == "yt-dlp"
        assert settings.download_dir == Path.home() / "Downloads"
        assert settings.log_level == "INFO"

    def test_env_overrides(self, tmp_path: Path) -> None:
        settings = Settings.from_env(
            {
                "YT_DLP_PATH": "/opt/bin/yt-dlp",
                "DOWNLOAD_DIR": str(tmp_path),
                "YTDLP_MCP_LOG_LEVEL": "debug",
            }
        )
        assert settings.ytdlp_path == str(Path("/opt/bin/yt-dlp"))
        assert settings.download_dir == tmp_path
        assert settings.log_level == "DEBUG"

    @patch("ytdlp_mcp.config.shutil.which", return_value="/usr/bin/yt-dlp")
    def test_blank_values_count_as_unset(self, _mock_which: object) -> None:
        settings = Settings.from_env({"YT_DLP_PATH": "  ", "DOWNLOAD_DIR": ""})
        assert settings.ytdlp_path == "/usr/bin/yt-dlp"
        assert settings.download_dir == Path.home() / "Downloads"

    def test_tilde_expanded(self) -> None:
        settings = Settings.from_env({"YT_DLP_PATH": "yt", "DOWNLOAD_DIR": "~/media"})
        assert settings.download_dir == Path.home() / "media"

    def test_reads_os_environ_by_default(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        monkeypatch.setenv("DOWNLOAD_DIR", str(tmp_path))
        monkeypatch.setenv("YT_DLP_PATH", "/x/yt-dlp")
        settings = Settings.from_env()
        assert settings.download_dir == tmp_path

    def test_frozen(self, tmp_path: Path) -> None:
        settings = Settings(ytdlp_path="yt-dlp", download_dir=tmp_path)
        with pytest.raises(AttributeError):
            settings.ytdlp_path = "other"  # type: ignore[misc]
