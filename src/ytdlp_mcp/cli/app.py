"""CLI application entry point and command routing for ytdlp-mcp.

This module is the **process error boundary** for the application.
It catches :class:`~ytdlp_mcp.exceptions.YtdlpMcpError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich on stderr and returning well-defined
exit codes.  Per-call failures never reach it; those are handled by
the MCP server layer.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the server,
  core and infrastructure layers.
* ``print()`` to stdout is forbidden: stdout carries the MCP JSON-RPC
  stream while the server runs.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from ytdlp_mcp.cli import exit_codes
from ytdlp_mcp.cli.console import console, print_error
from ytdlp_mcp.config import LOG_LEVEL_ENV, Settings
from ytdlp_mcp.exceptions import YtdlpMcpError
from ytdlp_mcp.utils.log import configure_logging, get_logger
from ytdlp_mcp.version import __version__

logger = get_logger(__name__)

COMMANDS: tuple[str, ...] = ("serve", "doctor")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``ytdlp-mcp [serve]``  — run the MCP server on stdio (default)
    * ``ytdlp-mcp doctor``   — environment diagnostics
    * ``ytdlp-mcp --version``
    """
    parser = argparse.ArgumentParser(
        prog="ytdlp-mcp",
        description="MCP server exposing yt-dlp download tools over stdio.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or INFO).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=COMMANDS,
        help="'serve' to run the MCP server (default), 'doctor' for diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_serve(settings: Settings) -> int:
    """Run the MCP stdio server until the client disconnects."""
    from ytdlp_mcp.infra.binary_detector import detect_ytdlp
    from ytdlp_mcp.server.mcp_server import create_server

    status = detect_ytdlp(settings.ytdlp_path)
    if not status.found:
        logger.warning(
            "yt-dlp executable %r not found; tool calls will fail until it is installed",
            settings.ytdlp_path,
        )
    logger.info("Download directory: %s", settings.download_dir)

    server = create_server(settings)
    asyncio.run(server.run_stdio())
    return exit_codes.SUCCESS


def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from ytdlp_mcp.cli.doctor import run_doctor

    return run_doctor(settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ytdlp-mcp CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(args.log_level or settings.log_level)

    if args.command == "doctor":
        return _handle_doctor(settings)

    return _handle_serve(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except YtdlpMcpError as exc:
        print_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
