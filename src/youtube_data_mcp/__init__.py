"""
YouTube Data MCP Server

Read-only YouTube Data API lookups (videos, transcripts, channels, playlists)
exposed as Model Context Protocol tools.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
