"""
Video operations: list, upload metadata, update, delete, rate, report abuse.
"""

from operations import OperationDescriptor
from tools.common import (
    HL,
    ON_BEHALF_OF_CONTENT_OWNER,
    ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
    PAGE_TOKEN,
    PRIVACY_STATUS,
    REGION_CODE,
    boolean,
    max_results,
    obj,
    part,
    string,
    string_list,
    tool_schema,
)

VIDEO_SNIPPET = obj({
    "title": string("Video title"),
    "description": string("Video description"),
    "tags": string_list("Video tags"),
    "categoryId": string("Video category ID"),
})

OPERATIONS = [
    OperationDescriptor(
        name="videos_list",
        description="Returns a list of videos that match the API request parameters.",
        input_schema=tool_schema({
            "part": part("video"),
            "chart": string("Chart type", enum=["mostPopular"]),
            "id": string("Comma-separated list of video IDs"),
            "maxResults": max_results(1),
            "myRating": string(enum=["dislike", "like"]),
            "hl": HL,
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "pageToken": PAGE_TOKEN,
            "regionCode": REGION_CODE,
            "videoCategoryId": string("Video category ID"),
        }, ["part"]),
        method="GET",
        path="videos",
    ),
    OperationDescriptor(
        name="videos_insert",
        description="Creates a video resource with the given metadata. Media upload is not performed.",
        input_schema=tool_schema({
            "part": part("video", "properties to set"),
            "notifySubscribers": boolean("Whether to notify channel subscribers"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
            "body": obj({
                "snippet": VIDEO_SNIPPET,
                "status": PRIVACY_STATUS,
            }, ["snippet"], "Video resource"),
        }, ["part", "body"]),
        method="POST",
        path="videos",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="videos_update",
        description="Updates a video's metadata.",
        input_schema=tool_schema({
            "part": part("video", "properties to update"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "id": string("Video ID"),
                "snippet": VIDEO_SNIPPET,
                "status": PRIVACY_STATUS,
            }, ["id"], "Video resource"),
        }, ["part", "body"]),
        method="PUT",
        path="videos",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="videos_delete",
        description="Deletes a YouTube video.",
        input_schema=tool_schema({
            "id": string("Video ID"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="DELETE",
        path="videos",
        requires_write=True,
        success_message="Video {id} deleted successfully",
    ),
    OperationDescriptor(
        name="videos_rate",
        description="Add a like or dislike rating to a video or remove a rating from a video.",
        input_schema=tool_schema({
            "id": string("Video ID"),
            "rating": string("Rating to apply", enum=["like", "dislike", "none"]),
        }, ["id", "rating"]),
        method="POST",
        path="videos/rate",
        requires_write=True,
        success_message="Video {id} rated: {rating}",
    ),
    OperationDescriptor(
        name="videos_getRating",
        description="Retrieves the ratings that the authorized user gave to a list of specified videos.",
        input_schema=tool_schema({
            "id": string("Comma-separated list of video IDs"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="GET",
        path="videos/getRating",
        requires_write=True,
    ),
    OperationDescriptor(
        name="videos_reportAbuse",
        description="Report a video for containing abusive content.",
        input_schema=tool_schema({
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "body": obj({
                "videoId": string("Video ID"),
                "reasonId": string("Reason ID from videoAbuseReportReasons_list"),
                "secondaryReasonId": string("Secondary reason ID"),
                "comments": string("Additional information"),
                "language": string("Language of the reporter"),
            }, ["videoId", "reasonId"], "Video abuse report"),
        }, ["body"]),
        method="POST",
        path="videos/reportAbuse",
        body_field="body",
        requires_write=True,
        success_message="Abuse report submitted successfully",
    ),
]
