"""
Tool catalog for the YouTube Data API MCP server.
"""

from operations import ToolRegistry

from .videos import OPERATIONS as VIDEO_OPERATIONS
from .channels import OPERATIONS as CHANNEL_OPERATIONS
from .search import OPERATIONS as SEARCH_OPERATIONS
from .comments import OPERATIONS as COMMENT_OPERATIONS
from .captions import OPERATIONS as CAPTION_OPERATIONS
from .reference import OPERATIONS as REFERENCE_OPERATIONS
from .playlists import OPERATIONS as PLAYLIST_OPERATIONS
from .subscriptions import OPERATIONS as SUBSCRIPTION_OPERATIONS
from .memberships import OPERATIONS as MEMBERSHIP_OPERATIONS

REGISTRY = ToolRegistry(
    VIDEO_OPERATIONS
    + CHANNEL_OPERATIONS
    + SEARCH_OPERATIONS
    + COMMENT_OPERATIONS
    + CAPTION_OPERATIONS
    + REFERENCE_OPERATIONS
    + PLAYLIST_OPERATIONS
    + SUBSCRIPTION_OPERATIONS
    + MEMBERSHIP_OPERATIONS
)

list_operations = REGISTRY.list_operations
find_operation = REGISTRY.find_operation

__all__ = [
    'REGISTRY',
    'list_operations',
    'find_operation',
]
