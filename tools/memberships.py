"""
Channel membership operations. Both require the channel owner's OAuth grant.
"""

from constants import MAX_RESULTS_LIMIT
from operations import OperationDescriptor
from tools.common import PAGE_TOKEN, max_results, part, string, tool_schema

OPERATIONS = [
    OperationDescriptor(
        name="members_list",
        description="Lists members (formerly known as 'sponsors') for a channel.",
        input_schema=tool_schema({
            "part": part("member"),
            "filterByMemberChannelId": string("Comma-separated list of member channel IDs"),
            "hasAccessToLevel": string("Membership level ID"),
            "maxResults": max_results(1, MAX_RESULTS_LIMIT["members"]),
            "mode": string(enum=["all_current", "updates"]),
            "pageToken": PAGE_TOKEN,
        }, ["part"]),
        method="GET",
        path="members",
        requires_write=True,
    ),
    OperationDescriptor(
        name="membershipsLevels_list",
        description=(
            "Returns a collection of zero or more membershipsLevel resources owned "
            "by the channel that authorized the API request."
        ),
        input_schema=tool_schema({
            "part": part("membershipsLevel"),
        }, ["part"]),
        method="GET",
        path="membershipsLevels",
        requires_write=True,
    ),
]
