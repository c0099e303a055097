"""
Caption track operations.
"""

from operations import OperationDescriptor
from tools.common import ON_BEHALF_OF_CONTENT_OWNER, part, string, tool_schema

OPERATIONS = [
    OperationDescriptor(
        name="captions_list",
        description="Returns a list of caption tracks that are associated with a specified video.",
        input_schema=tool_schema({
            "part": part("caption"),
            "videoId": string("Video ID"),
            "id": string("Comma-separated list of caption IDs"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["part", "videoId"]),
        method="GET",
        path="captions",
    ),
    OperationDescriptor(
        name="captions_download",
        description=(
            "Downloads a caption track. The track is returned in its original format "
            "unless tfmt is given, and in its original language unless tlang is given."
        ),
        input_schema=tool_schema({
            "id": string("Caption ID"),
            "tfmt": string("Caption format", enum=["sbv", "scc", "srt", "ttml", "vtt"]),
            "tlang": string("Translation language (ISO 639-1)"),
            "onBehalfOfContentOwner": ON_BEHALF_OF_CONTENT_OWNER,
        }, ["id"]),
        method="GET",
        path="captions/{id}",
    ),
]
