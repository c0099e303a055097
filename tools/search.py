"""
Search operation.
"""

from operations import OperationDescriptor
from tools.common import (
    ON_BEHALF_OF_CONTENT_OWNER,
    PAGE_TOKEN,
    REGION_CODE,
    boolean,
    max_results,
    part,
    string,
    tool_schema,
)

OPERATIONS = [
    OperationDescriptor(
        name="search_list",
        description="Returns a collection of search results that match the query parameters specified in the API request.",
        input_schema=tool_schema({
            "part": part("search"),
            "channelId": string("Channel ID to search within"),
            "channelType": string(enum=["any", "show"]),
            "eventType": string(enum=["completed", "live", "upcoming"]),
            "forContentOwner": boolean(),
            "forDeveloper": boolean(),
            "forMine": boolean(),
            "location": string("Latitude/longitude, e.g. \"37.42307,-122.08427\""),
            "locationRadius": string("Radius such as \"10km\""),
            "maxResults": max_results(),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "order": string(enum=["date", "rating", "relevance", "title", "videoCount", "viewCount"]),
            "pageToken": PAGE_TOKEN,
            "publishedAfter": string("RFC 3339 timestamp"),
            "publishedBefore": string("RFC 3339 timestamp"),
            "q": string("Search query"),
            "regionCode": REGION_CODE,
            "relevanceLanguage": string("ISO 639-1 language code"),
            "safeSearch": string(enum=["moderate", "none", "strict"]),
            "topicId": string("Freebase topic ID"),
            "type": string("Comma-separated resource types: channel, playlist, video"),
            "videoCaption": string(enum=["any", "closedCaption", "none"]),
            "videoCategoryId": string("Video category ID"),
            "videoDefinition": string(enum=["any", "high", "standard"]),
            "videoDimension": string(enum=["2d", "3d", "any"]),
            "videoDuration": string(enum=["any", "long", "medium", "short"]),
            "videoEmbeddable": string(enum=["any", "true"]),
            "videoLicense": string(enum=["any", "creativeCommon", "youtube"]),
            "videoSyndicated": string(enum=["any", "true"]),
            "videoType": string(enum=["any", "episode", "movie"]),
        }, ["part"]),
        method="GET",
        path="search",
    ),
]
