from typing import Optional


class YouTubeMCPError(Exception):
    """Base exception for errors reported back to the MCP client as tool errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = message
        if details:
            full_message += f"\nDetails: {details}"
        super().__init__(full_message)


class MissingCredential(YouTubeMCPError):
    """The YouTube API key is not configured."""

    def __init__(self, env_var: str = "YOUTUBE_API_KEY"):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is not set.")


class RemoteCallFailed(YouTubeMCPError):
    """A call to the YouTube Data API or transcript endpoint failed."""


class UnknownTool(YouTubeMCPError):
    """The requested tool name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArguments(YouTubeMCPError):
    """Tool arguments failed schema validation."""
