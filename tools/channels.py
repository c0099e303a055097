"""
Channel operations, including channel banners and channel sections.
"""

from constants import CHANNEL_SECTION_STYLES, CHANNEL_SECTION_TYPES
from operations import OperationDescriptor
from tools.common import (
    HL,
    ON_BEHALF_OF_CONTENT_OWNER,
    ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
    PAGE_TOKEN,
    boolean,
    integer,
    max_results,
    obj,
    part,
    string,
    string_list,
    tool_schema,
)

BRANDING_SETTINGS = obj({
    "channel": obj({
        "title": string("Channel title"),
        "description": string("Channel description"),
        "keywords": string("Channel keywords"),
        "defaultTab": string("Default tab"),
        "showRelatedChannels": boolean(),
        "showBrowseView": boolean(),
        "featuredChannelsTitle": string(),
        "featuredChannelsUrls": string_list(),
        "unsubscribedTrailer": string("Video ID of the trailer"),
    }),
    "image": obj({
        "bannerExternalUrl": string("Banner image URL"),
    }),
})

INVIDEO_PROMOTION = obj({
    "items": {
        "type": "array",
        "items": obj({
            "id": obj({
                "type": string(),
                "videoId": string(),
                "websiteUrl": string(),
                "recentlyUploadedBy": string(),
            }),
            "timing": obj({
                "offsetMs": string(),
                "durationMs": string(),
                "type": string(),
            }),
        }),
    },
    "useSmartTiming": boolean(),
})


def _section_snippet(required=None):
    return obj({
        "type": string(enum=CHANNEL_SECTION_TYPES),
        "style": string(enum=CHANNEL_SECTION_STYLES),
        "channelId": string("Channel ID"),
        "title": string("Section title"),
        "position": integer("Section position", minimum=0),
    }, required)


SECTION_CONTENT_DETAILS = obj({
    "channels": string_list("Channel IDs"),
    "playlists": string_list("Playlist IDs"),
})

OPERATIONS = [
    OperationDescriptor(
        name="channels_list",
        description="Returns a collection of zero or more channel resources that match the request criteria.",
        input_schema=tool_schema({
            "part": part("channel"),
            "categoryId": string("Guide category ID"),
            "forHandle": string("YouTube handle, with or without the @ prefix"),
            "forUsername": string("YouTube username"),
            "id": string("Comma-separated list of channel IDs"),
            "managedByMe": boolean(),
            "mine": boolean(),
            "maxResults": max_results(),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "pageToken": PAGE_TOKEN,
            "hl": HL,
        }, ["part"]),
        method="GET",
        path="channels",
    ),
    OperationDescriptor(
        name="channels_update",
        description=(
            "Updates a channel's metadata. Only the brandingSettings and "
            "invideoPromotion objects and their child properties can be updated."
        ),
        input_schema=tool_schema({
            "part": part("channel", "properties to update"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "id": string("Channel ID"),
                "brandingSettings": BRANDING_SETTINGS,
                "invideoPromotion": INVIDEO_PROMOTION,
            }, ["id"], "Channel resource"),
        }, ["part", "body"]),
        method="PUT",
        path="channels",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="channelBanners_insert",
        description=(
            "Starts a channel banner update. This is the first step of the "
            "three-step banner update process; image bytes are not uploaded."
        ),
        input_schema=tool_schema({
            "channelId": string("Channel ID"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
        }, ["channelId"]),
        method="POST",
        path="channelBanners/insert",
        requires_write=True,
    ),
    OperationDescriptor(
        name="channelSections_list",
        description="Returns a list of channelSection resources that match the API request criteria.",
        input_schema=tool_schema({
            "part": part("channelSection"),
            "channelId": string("Channel ID"),
            "id": string("Comma-separated list of channel section IDs"),
            "mine": boolean(),
            "hl": HL,
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["part"]),
        method="GET",
        path="channelSections",
    ),
    OperationDescriptor(
        name="channelSections_insert",
        description="Adds a channel section to the authenticated user's channel.",
        input_schema=tool_schema({
            "part": part("channelSection", "properties to set"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
            "body": obj({
                "snippet": _section_snippet(["type"]),
                "contentDetails": SECTION_CONTENT_DETAILS,
            }, ["snippet"], "ChannelSection resource"),
        }, ["part", "body"]),
        method="POST",
        path="channelSections",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="channelSections_update",
        description="Updates a channel section.",
        input_schema=tool_schema({
            "part": part("channelSection", "properties to update"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "id": string("Channel section ID"),
                "snippet": _section_snippet(),
                "contentDetails": SECTION_CONTENT_DETAILS,
            }, ["id"], "ChannelSection resource"),
        }, ["part", "body"]),
        method="PUT",
        path="channelSections",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="channelSections_delete",
        description="Deletes a channel section.",
        input_schema=tool_schema({
            "id": string("Channel section ID"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="DELETE",
        path="channelSections",
        requires_write=True,
        success_message="Channel section {id} deleted successfully",
    ),
]
