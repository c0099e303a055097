"""
Operation descriptors and the registry that holds them.
"""

import string
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

import mcp.types as types

from errors import UnknownOperation
from schema import check_schema


@dataclass(frozen=True)
class OperationDescriptor:
    """Static declaration of one callable YouTube operation.

    Attributes:
        name: Tool name advertised to clients (e.g. "videos_list")
        description: Human-readable description
        input_schema: JSON-schema-shaped parameter contract
        method: HTTP verb of the single outbound call
        path: Resource path relative to the API base; ``{placeholders}``
            are filled from the arguments of the same name
        body_field: Argument sent as the JSON request body, if any
        requires_write: Whether the call needs OAuth (read/write) credentials
        success_message: Text returned when the API answers with an empty body
    """

    name: str
    description: str
    input_schema: Dict[str, Any]
    method: str
    path: str
    body_field: Optional[str] = None
    requires_write: bool = False
    success_message: Optional[str] = None
    path_params: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        names = tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )
        object.__setattr__(self, "path_params", names)

    def as_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


class ToolRegistry:
    """Ordered, read-only collection of operation descriptors."""

    def __init__(self, operations: Iterable[OperationDescriptor]):
        self._operations: Dict[str, OperationDescriptor] = {}
        for op in operations:
            if op.name in self._operations:
                raise ValueError(f"Duplicate operation name: {op.name}")
            check_schema(op.input_schema)
            self._operations[op.name] = op

    def list_operations(self) -> Tuple[OperationDescriptor, ...]:
        return tuple(self._operations.values())

    def find_operation(self, name: str) -> OperationDescriptor:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperation(f"Unknown tool: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)
