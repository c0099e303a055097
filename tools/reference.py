"""
Channel activity feed and the read-only reference lists (categories,
languages, regions, abuse report reasons).
"""

from operations import OperationDescriptor
from tools.common import (
    HL,
    PAGE_TOKEN,
    REGION_CODE,
    boolean,
    max_results,
    part,
    string,
    tool_schema,
)


def _hl_list(name, resource, description):
    return OperationDescriptor(
        name=name,
        description=description,
        input_schema=tool_schema({"part": part(resource), "hl": HL}, ["part"]),
        method="GET",
        path=name.split("_")[0],
    )


OPERATIONS = [
    OperationDescriptor(
        name="activities_list",
        description="Returns a list of channel activity events that match the request criteria.",
        input_schema=tool_schema({
            "part": part("activity"),
            "channelId": string("Channel ID"),
            "home": boolean("Whether to retrieve the authenticated user's home activity feed"),
            "maxResults": max_results(),
            "mine": boolean("Whether to retrieve the authenticated user's activities"),
            "pageToken": PAGE_TOKEN,
            "publishedAfter": string("RFC 3339 timestamp"),
            "publishedBefore": string("RFC 3339 timestamp"),
            "regionCode": REGION_CODE,
        }, ["part"]),
        method="GET",
        path="activities",
    ),
    OperationDescriptor(
        name="guideCategories_list",
        description="Returns a list of categories that can be associated with YouTube channels.",
        input_schema=tool_schema({
            "part": part("guideCategory"),
            "hl": HL,
            "id": string("Comma-separated list of guide category IDs"),
            "regionCode": REGION_CODE,
        }, ["part"]),
        method="GET",
        path="guideCategories",
    ),
    _hl_list(
        "i18nLanguages_list",
        "i18nLanguage",
        "Returns a list of application languages that the YouTube website supports.",
    ),
    _hl_list(
        "i18nRegions_list",
        "i18nRegion",
        "Returns a list of content regions that the YouTube website supports.",
    ),
    _hl_list(
        "videoAbuseReportReasons_list",
        "videoAbuseReportReason",
        "Retrieve a list of reasons that can be used to report abusive videos.",
    ),
    OperationDescriptor(
        name="videoCategories_list",
        description="Returns a list of categories that can be associated with YouTube videos.",
        input_schema=tool_schema({
            "part": part("videoCategory"),
            "hl": HL,
            "id": string("Comma-separated list of video category IDs"),
            "regionCode": REGION_CODE,
        }, ["part"]),
        method="GET",
        path="videoCategories",
    ),
]
