"""
Constants for the YouTube Data API MCP server.
"""

# API Configuration
YOUTUBE_API_BASE = "https://youtube.googleapis.com/youtube/v3"
USER_AGENT = "youtube-data-mcp/1.0"
REQUEST_TIMEOUT = 30.0

# OAuth 2.0
TOKEN_URI = "https://oauth2.googleapis.com/token"
AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
OAUTH_SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]
OAUTH_REDIRECT_PORT = 3000
TOKEN_EXPIRY_SKEW = 60.0  # seconds shaved off expires_in

# Environment variables
ENV_API_KEY = "YOUTUBE_API_KEY"
ENV_CLIENT_ID = "YOUTUBE_CLIENT_ID"
ENV_CLIENT_SECRET = "YOUTUBE_CLIENT_SECRET"
ENV_REFRESH_TOKEN = "YOUTUBE_REFRESH_TOKEN"

# YouTube API Limits
MAX_RESULTS_LIMIT = {
    "default": 50,
    "comments": 100,
    "members": 1000,
}

# Common enumerations
PRIVACY_STATUSES = ["public", "private", "unlisted"]
TEXT_FORMATS = ["html", "plainText"]
CHANNEL_SECTION_TYPES = [
    "allPlaylists",
    "completedEvents",
    "liveEvents",
    "multipleChannels",
    "multiplePlaylists",
    "popularUploads",
    "recentUploads",
    "singlePlaylist",
    "subscriptions",
    "upcomingEvents",
]
CHANNEL_SECTION_STYLES = ["horizontalRow", "verticalList"]
