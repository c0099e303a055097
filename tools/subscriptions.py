"""
Subscription operations.
"""

from operations import OperationDescriptor
from tools.common import (
    ON_BEHALF_OF_CONTENT_OWNER,
    ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
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
        name="subscriptions_list",
        description="Returns subscription resources that match the API request criteria.",
        input_schema=tool_schema({
            "part": part("subscription"),
            "channelId": string("Channel ID"),
            "forChannelId": string("Comma-separated list of channel IDs to check against"),
            "id": string("Comma-separated list of subscription IDs"),
            "maxResults": max_results(),
            "mine": boolean(),
            "myRecentSubscribers": boolean(),
            "mySubscribers": boolean(),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
            "onBehalfOfContentOwnerChannel": ON_BEHALF_OF_CONTENT_OWNER_CHANNEL,
            "order": string(enum=["alphabetical", "relevance", "unread"]),
            "pageToken": PAGE_TOKEN,
        }, ["part"]),
        method="GET",
        path="subscriptions",
    ),
    OperationDescriptor(
        name="subscriptions_insert",
        description="Adds a subscription for the authenticated user's channel.",
        input_schema=tool_schema({
            "part": part("subscription", "properties to set"),
            "body": obj({
                "snippet": obj({
                    "resourceId": obj({
                        "kind": string("Resource kind, e.g. youtube#channel"),
                        "channelId": string("Channel ID to subscribe to"),
                    }, ["kind", "channelId"]),
                }, ["resourceId"]),
            }, ["snippet"], "Subscription resource"),
        }, ["part", "body"]),
        method="POST",
        path="subscriptions",
        body_field="body",
        requires_write=True,
    ),
    OperationDescriptor(
        name="subscriptions_delete",
        description="Deletes a subscription.",
        input_schema=tool_schema({
            "id": string("Subscription ID"),
        }, ["id"]),
        method="DELETE",
        path="subscriptions",
        requires_write=True,
        success_message="Subscription {id} deleted successfully",
    ),
]
