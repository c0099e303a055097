"""
Shared parameter schema fragments for the tool catalog.
"""

from typing import Any, Dict, List, Optional

from constants import MAX_RESULTS_LIMIT, PRIVACY_STATUSES


def string(description: Optional[str] = None, enum: Optional[List[str]] = None) -> Dict[str, Any]:
    field = {"type": "string"}
    if description:
        field["description"] = description
    if enum:
        field["enum"] = enum
    return field


def boolean(description: Optional[str] = None) -> Dict[str, Any]:
    field = {"type": "boolean"}
    if description:
        field["description"] = description
    return field


def integer(description: Optional[str] = None, minimum: Optional[int] = None,
            maximum: Optional[int] = None) -> Dict[str, Any]:
    field = {"type": "integer"}
    if description:
        field["description"] = description
    if minimum is not None:
        field["minimum"] = minimum
    if maximum is not None:
        field["maximum"] = maximum
    return field


def string_list(description: Optional[str] = None) -> Dict[str, Any]:
    field = {"type": "array", "items": {"type": "string"}}
    if description:
        field["description"] = description
    return field


def obj(properties: Dict[str, Any], required: Optional[List[str]] = None,
        description: Optional[str] = None) -> Dict[str, Any]:
    """Nested object schema; extra fields are allowed inside resource bodies."""
    field = {"type": "object", "properties": properties}
    if required:
        field["required"] = required
    if description:
        field["description"] = description
    return field


def tool_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    """Top-level input schema; unknown parameters are rejected."""
    return {
        "type": "object",
        "properties": properties,
        "required": required or [],
        "additionalProperties": False,
    }


def part(resource: str, verb: str = "resource properties") -> Dict[str, Any]:
    return string(f"Comma-separated list of {resource} {verb}")


def max_results(minimum: int = 0, maximum: int = MAX_RESULTS_LIMIT["default"]) -> Dict[str, Any]:
    return integer("Maximum number of items to return", minimum, maximum)


ON_BEHALF_OF_CONTENT_OWNER = string("Content owner the request is made on behalf of")
ON_BEHALF_OF_CONTENT_OWNER_CHANNEL = string("Channel the content owner is acting for")
PAGE_TOKEN = string("Page token from a previous response")
HL = string("Language for textual properties")
REGION_CODE = string("ISO 3166-1 alpha-2 country code")
PRIVACY_STATUS = obj({"privacyStatus": string(enum=PRIVACY_STATUSES)})
