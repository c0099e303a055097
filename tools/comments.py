"""
Comment thread and comment operations, including moderation.
"""

from constants import MAX_RESULTS_LIMIT, TEXT_FORMATS
from operations import OperationDescriptor
from tools.common import (
    PAGE_TOKEN,
    boolean,
    max_results,
    obj,
    part,
    string,
    tool_schema,
)

OPERATIONS = [
    OperationDescriptor(
        name="commentThreads_list",
        description="Returns a list of comment threads that match the API request parameters.",
        input_schema=tool_schema({
            "part": part("commentThread"),
            "allThreadsRelatedToChannelId": string("Channel ID whose related threads to return"),
            "channelId": string("Channel ID"),
            "id": string("Comma-separated list of comment thread IDs"),
            "maxResults": max_results(1, MAX_RESULTS_LIMIT["comments"]),
            "moderationStatus": string(enum=["published", "heldForReview", "likelySpam"]),
            "order": string(enum=["time", "relevance"]),
            "pageToken": PAGE_TOKEN,
            "searchTerms": string("Limit results to comments containing these terms"),
            "textFormat": string(enum=TEXT_FORMATS),
            "videoId": string("Video ID"),
        }, ["part"]),
        method="GET",
        path="commentThreads",
    ),
    OperationDescriptor(
        name="commentThreads_insert",
        description="Creates a new top-level comment on a video.",
        input_schema=tool_schema({
            "part": part("commentThread", "properties to set"),
            "body": obj({
                "snippet": obj({
                    "channelId": string("Channel ID of the video owner"),
                    "videoId": string("Video ID to comment on"),
                    "topLevelComment": obj({
                        "snippet": obj({
                            "textOriginal": string("Comment text"),
                        }, ["textOriginal"]),
                    }, ["snippet"]),
                }, ["topLevelComment"]),
            }, ["snippet"], "CommentThread resource"),
        }, ["part", "body"]),
        method="POST",
        path="commentThreads",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="comments_list",
        description="Returns a list of comments that match the API request parameters.",
        input_schema=tool_schema({
            "part": part("comment"),
            "id": string("Comma-separated list of comment IDs"),
            "maxResults": max_results(1, MAX_RESULTS_LIMIT["comments"]),
            "pageToken": PAGE_TOKEN,
            "parentId": string("Parent comment ID"),
            "textFormat": string(enum=TEXT_FORMATS),
        }, ["part"]),
        method="GET",
        path="comments",
    ),
    OperationDescriptor(
        name="comments_insert",
        description="Creates a reply to an existing comment.",
        input_schema=tool_schema({
            "part": part("comment", "properties to set"),
            "body": obj({
                "snippet": obj({
                    "parentId": string("Parent comment ID"),
                    "textOriginal": string("Reply text"),
                }, ["parentId", "textOriginal"]),
            }, ["snippet"], "Comment resource"),
        }, ["part", "body"]),
        method="POST",
        path="comments",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="comments_update",
        description="Modifies a comment.",
        input_schema=tool_schema({
            "part": part("comment", "properties to update"),
            "body": obj({
                "id": string("Comment ID"),
                "snippet": obj({
                    "textOriginal": string("Updated comment text"),
                }),
            }, ["id"], "Comment resource"),
        }, ["part", "body"]),
        method="PUT",
        path="comments",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="comments_delete",
        description="Deletes a comment.",
        input_schema=tool_schema({
            "id": string("Comment ID"),
        }, ["id"]),
        method="DELETE",
        path="comments",
        requires_write=True,
        success_message="Comment {id} deleted successfully",
    ),
    OperationDescriptor(
        name="comments_setModerationStatus",
        description="Sets the moderation status of one or more comments.",
        input_schema=tool_schema({
            "id": string("Comma-separated list of comment IDs"),
            "moderationStatus": string(enum=["published", "heldForReview", "likelySpam", "rejected"]),
            "banAuthor": boolean("Whether to ban the author (only with moderationStatus=rejected)"),
        }, ["id", "moderationStatus"]),
        method="POST",
        path="comments/setModerationStatus",
        requires_write=True,
        success_message="Comment {id} moderation status set to {moderationStatus}",
    ),
    OperationDescriptor(
        name="comments_markAsSpam",
        description="Marks a comment as spam.",
        input_schema=tool_schema({
            "id": string("Comma-separated list of comment IDs"),
        }, ["id"]),
        method="POST",
        path="comments/markAsSpam",
        requires_write=True,
        success_message="Comment {id} marked as spam",
    ),
]
