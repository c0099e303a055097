"""
Playlist and playlist item operations.
"""

from operations import OperationDescriptor
from tools.common import (
    HL,
    ON_BEHALF_OF_CONTENT_OWNER,
    ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
    PAGE_TOKEN,
    PRIVACY_STATUS,
    boolean,
    integer,
    max_results,
    obj,
    part,
    string,
    string_list,
    tool_schema,
)


def _playlist_snippet(required=None):
    return obj({
        "title": string("Playlist title"),
        "description": string("Playlist description"),
        "tags": string_list("Playlist tags"),
        "defaultLanguage": string("Language of the title and description"),
    }, required)


def _resource_id(required=None):
    return obj({
        "kind": string("Resource kind, e.g. youtube#video"),
        "videoId": string("Video ID"),
    }, required)


OPERATIONS = [
    OperationDescriptor(
        name="playlists_list",
        description="Returns a collection of playlists that match the API request parameters.",
        input_schema=tool_schema({
            "part": part("playlist"),
            "channelId": string("Channel ID"),
            "id": string("Comma-separated list of playlist IDs"),
            "hl": HL,
            "maxResults": max_results(),
            "mine": boolean(),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
            "pageToken": PAGE_TOKEN,
        }, ["part"]),
        method="GET",
        path="playlists",
    ),
    OperationDescriptor(
        name="playlists_insert",
        description="Creates a playlist.",
        input_schema=tool_schema({
            "part": part("playlist", "properties to set"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
            "body": obj({
                "snippet": _playlist_snippet(["title"]),
                "status": PRIVACY_STATUS,
            }, ["snippet"], "Playlist resource"),
        }, ["part", "body"]),
        method="POST",
        path="playlists",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="playlists_update",
        description="Modifies a playlist.",
        input_schema=tool_schema({
            "part": part("playlist", "properties to update"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "id": string("Playlist ID"),
                "snippet": _playlist_snippet(),
                "status": PRIVACY_STATUS,
            }, ["id"], "Playlist resource"),
        }, ["part", "body"]),
        method="PUT",
        path="playlists",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="playlists_delete",
        description="Deletes a playlist.",
        input_schema=tool_schema({
            "id": string("Playlist ID"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="DELETE",
        path="playlists",
        requires_write=True,
        success_message="Playlist {id} deleted successfully",
    ),
    OperationDescriptor(
        name="playlistItems_list",
        description="Returns a collection of playlist items that match the API request parameters.",
        input_schema=tool_schema({
            "part": part("playlistItem"),
            "id": string("Comma-separated list of playlist item IDs"),
            "maxResults": max_results(),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "pageToken": PAGE_TOKEN,
            "playlistId": string("Playlist ID"),
            "videoId": string("Only return items that contain this video"),
        }, ["part"]),
        method="GET",
        path="playlistItems",
    ),
    OperationDescriptor(
        name="playlistItems_insert",
        description="Adds a resource to a playlist.",
        input_schema=tool_schema({
            "part": part("playlistItem", "properties to set"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "snippet": obj({
                    "playlistId": string("Playlist ID"),
                    "resourceId": _resource_id(["kind", "videoId"]),
                    "position": integer("Position in playlist", minimum=0),
                }, ["playlistId", "resourceId"]),
            }, ["snippet"], "PlaylistItem resource"),
        }, ["part", "body"]),
        method="POST",
        path="playlistItems",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="playlistItems_update",
        description="Modifies a playlist item.",
        input_schema=tool_schema({
            "part": part("playlistItem", "properties to update"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "id": string("Playlist item ID"),
                "snippet": obj({
                    "playlistId": string("Playlist ID"),
                    "resourceId": _resource_id(),
                    "position": integer("Position in playlist", minimum=0),
                }),
            }, ["id"], "PlaylistItem resource"),
        }, ["part", "body"]),
        method="PUT",
        path="playlistItems",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="playlistItems_delete",
        description="Deletes a playlist item.",
        input_schema=tool_schema({
            "id": string("Playlist item ID"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="DELETE",
        path="playlistItems",
        requires_write=True,
        success_message="Playlist item {id} deleted successfully",
    ),
]
