"""
Capability-gated dispatch of tool invocations to the YouTube Data API.
"""

import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import httpx

from api_client import make_youtube_request
from auth import Capability, CredentialResolver
from constants import ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_REFRESH_TOKEN
from errors import PermissionDenied, YouTubeToolError
from operations import OperationDescriptor, ToolRegistry
from schema import validate_arguments
from tools import REGISTRY


@dataclass(frozen=True)
class ToolResponse:
    """Outcome of one invocation: success text or a failure message."""

    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.error if self.is_error else self.text}],
            "isError": self.is_error,
        }


class Dispatcher:
    """Executes tool invocations against the YouTube Data API.

    Each invocation performs at most one outbound API call (plus a token
    refresh in OAuth mode when the cached token is stale). Nothing is cached
    between invocations.

    Args:
        credentials: Resolver holding the startup credential state
        registry: Operation catalog; defaults to the full tool catalog
        client: HTTP client to reuse; when omitted a client is opened per call
    """

    def __init__(
        self,
        credentials: CredentialResolver,
        registry: Optional[ToolRegistry] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.credentials = credentials
        self.registry = REGISTRY if registry is None else registry
        self.client = client

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResponse:
        """Run one tool invocation to completion; failures become error responses."""
        try:
            operation = self.prepare(name, arguments)
            result = await self._execute(operation, arguments or {})
        except YouTubeToolError as e:
            print(f"Tool {name} failed: {str(e)}", file=sys.stderr)
            return ToolResponse.failure(str(e))
        except Exception as e:
            print(f"Unexpected error in tool {name}: {e!r}", file=sys.stderr)
            return ToolResponse.failure(f"Unexpected error in {name}: {str(e)}")
        return ToolResponse.success(result)

    def prepare(self, name: str, arguments: Optional[Dict[str, Any]]) -> OperationDescriptor:
        """Resolve, validate and authorize an invocation without any I/O.

        Raises:
            UnknownOperation: If the name is not in the registry
            InvalidArgument: If the arguments do not fit the schema
            PermissionDenied: If a write operation runs with read-only credentials
        """
        operation = self.registry.find_operation(name)
        validate_arguments(operation.input_schema, {} if arguments is None else arguments)
        if operation.requires_write and self.credentials.capability is Capability.READ_ONLY:
            raise PermissionDenied(
                f"{operation.name} requires OAuth authentication (read/write access), "
                f"but the server is running with a read-only API key. Set "
                f"{ENV_CLIENT_ID}, {ENV_CLIENT_SECRET} and {ENV_REFRESH_TOKEN} "
                f"(and unset YOUTUBE_API_KEY) to enable it."
            )
        return operation

    async def _execute(self, operation: OperationDescriptor, arguments: Dict[str, Any]) -> str:
        endpoint, params, body = partition_arguments(operation, arguments)
        if self.client is not None:
            payload = await self._call(self.client, operation, endpoint, params, body)
        else:
            async with httpx.AsyncClient() as client:
                payload = await self._call(client, operation, endpoint, params, body)
        return render_payload(operation, arguments, payload)

    async def _call(
        self,
        client: httpx.AsyncClient,
        operation: OperationDescriptor,
        endpoint: str,
        params: Dict[str, Any],
        body: Any,
    ) -> Any:
        auth = await self.credentials.current_auth_decoration(client)
        return await make_youtube_request(client, operation.method, endpoint, auth, params, body)


def partition_arguments(
    operation: OperationDescriptor, arguments: Dict[str, Any]
) -> Tuple[str, Dict[str, Any], Any]:
    """Split arguments into the resolved endpoint, query parameters and body."""
    endpoint = operation.path.format(
        **{name: quote(str(arguments[name]), safe="") for name in operation.path_params}
    )
    body = arguments.get(operation.body_field) if operation.body_field else None
    skipped = set(operation.path_params)
    if operation.body_field:
        skipped.add(operation.body_field)
    params = {
        key: _query_value(value)
        for key, value in arguments.items()
        if key not in skipped and value is not None
    }
    return endpoint, params, body


def render_payload(operation: OperationDescriptor, arguments: Dict[str, Any], payload: Any) -> str:
    if payload is None:
        if operation.success_message:
            return operation.success_message.format(**arguments)
        return f"{operation.name} completed successfully"
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2)


def _query_value(value: Any) -> Any:
    # integral floats such as 5.0 go upstream as 5
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
