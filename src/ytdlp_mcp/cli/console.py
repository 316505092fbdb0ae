"""stderr output for the ``ytdlp-mcp`` command line.

While ``serve`` runs, stdout is the MCP transport, so everything the CLI
shows a human goes through :data:`console`, which targets stderr.  Rich
is resolved per call; without it the markup is printed as-is through
``print(..., file=sys.stderr)``.
"""

from __future__ import annotations

import sys
from typing import Any

from ytdlp_mcp.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed.",
            hint="pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Return a Rich ``Console`` bound to stderr.

    Raises
    ------
    EnvironmentError
        If rich cannot be imported.
    """
    return _load_rich_console_class()(stderr=True)


class _StderrConsole:
    """``console.print`` for the CLI: Rich on stderr, or plain stderr."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _StderrConsole()


def print_error(message: str, hint: str | None = None) -> None:
    """Show *message* as an error, followed by each line of *hint*."""
    console.print(f"[bold red]Error:[/bold red] {message}")
    if hint:
        for index, line in enumerate(hint.splitlines()):
            prefix = "[yellow]Hint:[/yellow] " if index == 0 else "      "
            console.print(f"{prefix}{line}")
