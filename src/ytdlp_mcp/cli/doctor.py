"""``ytdlp-mcp doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can serve tool calls: the configured
yt-dlp executable, ffmpeg, and the download directory.

This module lives in the CLI layer — it may import from ``infra``
and ``config``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from ytdlp_mcp.cli import exit_codes
from ytdlp_mcp.cli.console import console
from ytdlp_mcp.config import DOWNLOAD_DIR_ENV, YTDLP_PATH_ENV, Settings
from ytdlp_mcp.infra.binary_detector import BinaryStatus, detect_ffmpeg, detect_ytdlp
from ytdlp_mcp.version import __version__

Check = tuple[str, str, str]

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _ytdlp_executable_check(status_obj: BinaryStatus) -> Check:
    """Return (label, value, status) for the configured yt-dlp executable."""
    if status_obj.found:
        return "yt-dlp", str(status_obj.path), OK
    return "yt-dlp", f"{status_obj.name} not found", "[red]FAIL[/red]"


def _ytdlp_package_check() -> Check:
    """Return (label, value, status) for the yt-dlp Python package row."""
    try:
        from yt_dlp.version import __version__ as ydl_ver
    except ImportError:
        return "yt-dlp pkg", "NOT INSTALLED", WARN
    return "yt-dlp pkg", ydl_ver, OK


def _ffmpeg_check(status_obj: BinaryStatus) -> Check:
    """Return (label, value, status) for the ffmpeg row."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "ffmpeg", path_str, OK
    return "ffmpeg", "not found", WARN


def _download_dir_check(settings: Settings) -> Check:
    """Return (label, value, status) for the download directory row."""
    path = settings.download_dir
    if path.is_dir():
        return "Downloads", str(path), OK
    if path.exists():
        return "Downloads", f"{path} (not a directory)", "[red]FAIL[/red]"
    return "Downloads", f"{path} (missing)", "[red]FAIL[/red]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, OK


def _server_version_check() -> Check:
    """Return (label, value, status) for the ytdlp-mcp version row."""
    return "ytdlp-mcp", __version__, OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nytdlp-mcp doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _emit(line: str, *, rich_available: bool) -> None:
    """Print one guidance line, stripping markup when Rich is absent."""
    if rich_available:
        console.print(line)
        return
    plain = line
    for tag in ("[yellow]", "[/yellow]", "[bold]", "[/bold]", "[bold red]",
                "[/bold red]", "[bold green]", "[/bold green]"):
        plain = plain.replace(tag, "")
    print(plain, file=sys.stderr)


def _install_guidance(status_obj: BinaryStatus, tool: str, *, rich_available: bool) -> None:
    if status_obj.found or not status_obj.install_commands:
        return
    _emit(f"[yellow]{tool} is not installed.[/yellow]", rich_available=rich_available)
    _emit("Install using one of the following commands:\n", rich_available=rich_available)
    for cmd in status_obj.install_commands:
        _emit(f"  [bold]{cmd}[/bold]", rich_available=rich_available)
    _emit("", rich_available=rich_available)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: Settings | None = None) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
        ffmpeg and the yt-dlp Python package only warn.
    """
    if settings is None:
        settings = Settings.from_env()

    ytdlp_status = detect_ytdlp(settings.ytdlp_path)
    ffmpeg_status = detect_ffmpeg()

    checks = [
        _server_version_check(),
        _python_version_check(),
        _ytdlp_executable_check(ytdlp_status),
        _ytdlp_package_check(),
        _ffmpeg_check(ffmpeg_status),
        _download_dir_check(settings),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="ytdlp-mcp doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    _install_guidance(ytdlp_status, "yt-dlp", rich_available=rich_available)
    if not ytdlp_status.found:
        _emit(
            f"Or set [bold]{YTDLP_PATH_ENV}[/bold] to the executable path.\n",
            rich_available=rich_available,
        )
    _install_guidance(ffmpeg_status, "ffmpeg", rich_available=rich_available)
    if not settings.download_dir.is_dir():
        _emit(
            f"[yellow]Create {settings.download_dir} or set "
            f"[bold]{DOWNLOAD_DIR_ENV}[/bold] to an existing directory.[/yellow]\n",
            rich_available=rich_available,
        )

    if has_failure:
        _emit("[bold red]Some checks failed.[/bold red]", rich_available=rich_available)
        return exit_codes.GENERAL_ERROR

    _emit("[bold green]All checks passed.[/bold green]", rich_available=rich_available)
    return exit_codes.SUCCESS
