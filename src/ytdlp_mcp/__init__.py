"""ytdlp-mcp — yt-dlp download tools served over the Model Context Protocol.

Wraps the ``yt-dlp`` executable as a child process with a strict layered
architecture.
"""

from ytdlp_mcp.version import __version__

__all__: list[str] = ["__version__"]
