"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from ytdlp_mcp.core.models import ProcessResult


class ProcessRunner(Protocol):
    """Contract for yt-dlp execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).  Test doubles record calls through this seam.
    """

    async def run(
        self,
        arguments: Sequence[str],
        **spawn_overrides: Any,
    ) -> ProcessResult:
        """Run yt-dlp with *arguments* and wait for it to finish.

        Parameters
        ----------
        arguments:
            Argument vector, excluding the executable itself.
        spawn_overrides:
            Extra keyword arguments for the process spawn call.
            Reserved; no current caller passes any.

        Returns
        -------
        ProcessResult
            Captured stdout, stderr and the (zero) exit code.

        Raises
        ------
        SpawnFailedError
            When the executable cannot be started.
        ProcessFailedError
            When the process exits with a non-zero status.
        """
        ...  # pragma: no cover
