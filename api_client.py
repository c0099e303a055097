"""
YouTube API client handling HTTP requests and response processing.
"""

import sys
from typing import Any, Dict, Optional

import httpx

from auth import AuthDecoration
from constants import REQUEST_TIMEOUT, USER_AGENT, YOUTUBE_API_BASE
from errors import UpstreamFailure
from utils import redact_params, safe_get, truncate_text


async def make_youtube_request(
    client: httpx.AsyncClient,
    method: str,
    endpoint: str,
    auth: AuthDecoration,
    params: Optional[Dict[str, Any]] = None,
    data: Any = None,
) -> Any:
    """Make a single request to the YouTube API.

    Args:
        client: HTTP client to send the request with
        method: HTTP verb ("GET", "POST", "PUT", "DELETE")
        endpoint: The YouTube API endpoint (e.g., "videos", "captions/abc")
        auth: Credentials to attach to the request
        params: Dictionary of query parameters
        data: JSON body, if any

    Returns:
        Parsed JSON payload, raw text for non-JSON payloads, or None for an
        empty response

    Raises:
        UpstreamFailure: With the most specific error message available
    """
    query = dict(params or {})
    query.update(auth.params)

    url = f"{YOUTUBE_API_BASE}/{endpoint}"
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    headers.update(auth.headers)

    print(f"Making {method} request to {url} with params {redact_params(query)}", file=sys.stderr)
    try:
        response = await client.request(
            method,
            url,
            params=query,
            json=data,
            headers=headers,
            timeout=REQUEST_TIMEOUT,
        )
    except httpx.RequestError as e:
        print(f"Request error to {url}: {str(e)}", file=sys.stderr)
        raise UpstreamFailure(f"YouTube API error: Request error: {str(e)}") from e

    print(f"Response status: {response.status_code}", file=sys.stderr)

    if response.is_error:
        print(f"Error response content: {truncate_text(response.text, 500)}", file=sys.stderr)
        raise UpstreamFailure(
            f"YouTube API error: {extract_error_message(response)}",
            status_code=response.status_code,
        )

    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" not in content_type:
        return response.text

    try:
        return response.json()
    except ValueError as e:
        print(f"Error parsing JSON from {url}: {str(e)}", file=sys.stderr)
        raise UpstreamFailure(f"YouTube API error: Error parsing JSON from {url}: {str(e)}") from e


def extract_error_message(response: httpx.Response) -> str:
    """Pick the most specific message out of an error response.

    Google APIs answer with ``{"error": {"code": ..., "message": ...}}``; the
    OAuth endpoints use ``{"error": ..., "error_description": ...}``.
    """
    fallback = f"HTTP error {response.status_code}: {response.reason_phrase}"
    try:
        error_json = response.json()
    except ValueError:
        return fallback

    if not isinstance(error_json, dict):
        return fallback

    message = safe_get(error_json, "error", "message")
    if message:
        return message

    first_error = safe_get(error_json, "error", "errors", default=[])
    if isinstance(first_error, list) and first_error:
        reason = safe_get(first_error[0], "message") or safe_get(first_error[0], "reason")
        if reason:
            return reason

    return safe_get(error_json, "error_description") or fallback
