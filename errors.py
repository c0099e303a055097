"""
Error types raised while resolving credentials and dispatching tool calls.
"""


class YouTubeToolError(Exception):
    """Base class for every failure the server reports to a caller."""


class ConfigurationError(YouTubeToolError):
    """No usable credential configuration was found at startup."""


class UnknownOperation(YouTubeToolError):
    pass


class InvalidArgument(YouTubeToolError):
    pass


class PermissionDenied(YouTubeToolError):
    pass


class UpstreamFailure(YouTubeToolError):
    """The YouTube API call failed or returned a non-success status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class TokenRefreshFailure(UpstreamFailure):
    """The OAuth token endpoint did not hand out a bearer token."""


class ToolCallFailed(Exception):
    """Raised from the MCP handler so the SDK reports an error result."""
