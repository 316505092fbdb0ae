"""Custom exception hierarchy for ytdlp-mcp.

All exceptions that cross layer boundaries must inherit from
:class:`YtdlpMcpError`.  Raw OS or subprocess exceptions must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
YtdlpMcpError
├── InvalidRequestError
│   └── UnknownOperationError
├── SpawnFailedError
├── ProcessFailedError
├── MalformedMetadataError
└── EnvironmentError
    └── EnvironmentCheckError
"""

from __future__ import annotations


class YtdlpMcpError(Exception):
    """Base exception for all ytdlp-mcp errors.

    Every failure a tool call can report must map to a subclass of this
    exception so that the MCP error boundary can render a clean
    ``Error: ...`` text result instead of a protocol-level failure.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Request validation ----------------------------------------------------

class InvalidRequestError(YtdlpMcpError):
    """Raised when a tool call is missing or has a malformed parameter.

    Always raised before any process is spawned.
    """


class UnknownOperationError(InvalidRequestError):
    """Raised when a tool call names an operation that does not exist."""


# --- Process execution -----------------------------------------------------

class SpawnFailedError(YtdlpMcpError):
    """Raised when the yt-dlp executable could not be started."""


class ProcessFailedError(YtdlpMcpError):
    """Raised when yt-dlp ran but exited with a non-zero status."""

    def __init__(
        self,
        exit_code: int,
        stderr: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"yt-dlp exited with code {exit_code}: {stderr}", hint=hint)
        self.exit_code: int = exit_code
        self.stderr: str = stderr


# --- Output parsing --------------------------------------------------------

class MalformedMetadataError(YtdlpMcpError):
    """Raised when ``--dump-json`` output cannot be parsed as a JSON object."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(YtdlpMcpError):
    """Raised when a required runtime dependency is not available."""


class EnvironmentCheckError(EnvironmentError):
    """Raised when a required environment precondition is not met."""


def append_ytdlp_upgrade_suggestion(hint: str) -> str:
    """Append yt-dlp upgrade guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Also try updating yt-dlp:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    pip install --upgrade yt-dlp",
        )
    )
