"""
Validation of tool arguments against their declared parameter schemas.

Schemas are the same JSON Schema dicts advertised to MCP clients as
``inputSchema``; they are checked with ``jsonschema``, the validator the MCP
SDK itself uses for tool input.
"""

from typing import Any, Dict, Iterable

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from errors import InvalidArgument


def check_schema(schema: Dict[str, Any]) -> None:
    """Reject a malformed schema declaration.

    Raises:
        jsonschema.exceptions.SchemaError: If the schema is not valid Draft 7
    """
    Draft7Validator.check_schema(schema)


def format_path(path: Iterable[Any]) -> str:
    """Render a jsonschema error path as ``body.snippet.tags[1]``."""
    rendered = ""
    for step in path:
        if isinstance(step, int):
            rendered += f"[{step}]"
        else:
            rendered = f"{rendered}.{step}" if rendered else str(step)
    return rendered or "arguments"


def validate_arguments(schema: Dict[str, Any], arguments: Any) -> None:
    """Validate a whole argument bundle against a tool's input schema.

    Top-level ``None`` values are treated as omitted parameters.

    Raises:
        InvalidArgument: naming the path of the most relevant offending field
    """
    if not isinstance(arguments, dict):
        raise InvalidArgument("arguments must be a JSON object")
    present = {key: value for key, value in arguments.items() if value is not None}

    error = best_match(Draft7Validator(schema).iter_errors(present))
    if error is not None:
        raise InvalidArgument(f"{format_path(error.absolute_path)}: {error.message}")
