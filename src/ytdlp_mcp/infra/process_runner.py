"""asyncio-backed implementation of :class:`~ytdlp_mcp.core.protocols.ProcessRunner`.

This module is the **only** place in the codebase that spawns the
yt-dlp executable.  OS errors raised by the spawn are caught here and
re-raised as :class:`~ytdlp_mcp.exceptions.SpawnFailedError`; non-zero
exits become :class:`~ytdlp_mcp.exceptions.ProcessFailedError`.

Each call owns its process and its two output buffers, so concurrent
calls never share state.  There is no timeout and no retry: the call
waits until the child terminates on its own.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ytdlp_mcp.config import YTDLP_PATH_ENV
from ytdlp_mcp.core.models import ProcessResult
from ytdlp_mcp.exceptions import ProcessFailedError, SpawnFailedError
from ytdlp_mcp.utils.log import get_logger

logger = get_logger(__name__)

_READ_CHUNK: int = 64 * 1024


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    """Append everything *stream* yields to *buffer* until EOF."""
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            return
        buffer.extend(chunk)


def _decode(buffer: bytearray) -> str:
    return buffer.decode("utf-8", errors="replace")


class AsyncProcessRunner:
    """Concrete :class:`ProcessRunner` using :mod:`asyncio` subprocesses.

    Usage::

        runner = AsyncProcessRunner("/usr/bin/yt-dlp", Path("~/Downloads"))
        result = await runner.run(["--dump-json", url])

    This class satisfies the :class:`~ytdlp_mcp.core.protocols.ProcessRunner`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, executable: str, working_dir: Path) -> None:
        self._executable: str = executable
        self._working_dir: Path = working_dir

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    async def run(
        self,
        arguments: Sequence[str],
        **spawn_overrides: Any,
    ) -> ProcessResult:
        """Spawn yt-dlp with *arguments* and collect its output.

        Raises
        ------
        SpawnFailedError
            If the executable is missing, not executable, or the working
            directory does not exist.
        ProcessFailedError
            If the process exits with a non-zero status.
        """
        spawn_kwargs: dict[str, Any] = {
            "cwd": str(self._working_dir),
            "stdout": asyncio.subprocess.PIPE,
            "stderr": asyncio.subprocess.PIPE,
        }
        spawn_kwargs.update(spawn_overrides)

        logger.debug(
            "Spawning %s %s (cwd=%s)",
            self._executable, list(arguments), self._working_dir,
        )

        try:
            process = await asyncio.create_subprocess_exec(
                self._executable,
                *arguments,
                **spawn_kwargs,
            )
        except OSError as exc:
            logger.warning("Could not start %s: %s", self._executable, exc)
            raise SpawnFailedError(
                f"Failed to start {self._executable}: {exc}",
                hint=(
                    f"Install yt-dlp or point {YTDLP_PATH_ENV} at the executable, "
                    f"and check that {self._working_dir} exists."
                ),
            ) from exc

        stdout_buf = bytearray()
        stderr_buf = bytearray()
        await asyncio.gather(
            _drain(process.stdout, stdout_buf),
            _drain(process.stderr, stderr_buf),
        )
        exit_code = await process.wait()

        stdout = _decode(stdout_buf)
        stderr = _decode(stderr_buf)

        if exit_code != 0:
            logger.warning("yt-dlp exited with code %d", exit_code)
            raise ProcessFailedError(exit_code, stderr)

        logger.debug("yt-dlp finished (%d bytes of output)", len(stdout_buf))
        return ProcessResult(stdout=stdout, stderr=stderr, exit_code=exit_code)
