"""Shared pytest fixtures and configuration for the ytdlp-mcp test suite.

Guidelines
----------
* No internet access in any test.
* The real yt-dlp executable is never spawned; the process runner is
  exercised against ``sys.executable`` stubs only.
* Core tests must be pure — no side effects.
* Async code is driven with :func:`asyncio.run` inside plain tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from ytdlp_mcp.core.models import ProcessResult


class SpyRunner:
    """ProcessRunner double that records every argument vector it gets.

    Returns *stdout* with exit code 0, or raises *error* when given.
    """

    def __init__(self, stdout: str = "", *, error: Exception | None = None) -> None:
        self.stdout = stdout
        self.error = error
        self.calls: list[list[str]] = []

    async def run(self, arguments: Sequence[str], **spawn_overrides: Any) -> ProcessResult:
        self.calls.append(list(arguments))
        if self.error is not None:
            raise self.error
        return ProcessResult(stdout=self.stdout, stderr="", exit_code=0)


@pytest.fixture
def spy_runner() -> SpyRunner:
    return SpyRunner(stdout="[download] done\n")


@pytest.fixture
def runner_factory() -> type[SpyRunner]:
    """Build spies with custom stdout or a raised error."""
    return SpyRunner
