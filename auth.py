"""
Credential resolution for the YouTube Data API.

Two mutually exclusive modes are supported:

- API key: the key is attached to every request as the ``key`` query
  parameter. Read-only.
- OAuth 2.0: a long-lived refresh token is exchanged for short-lived bearer
  tokens on demand. Read and write.
"""

import math
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from constants import (
    ENV_API_KEY,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    ENV_REFRESH_TOKEN,
    REQUEST_TIMEOUT,
    TOKEN_EXPIRY_SKEW,
    TOKEN_URI,
    USER_AGENT,
)
from errors import ConfigurationError, TokenRefreshFailure
from utils import get_env, safe_get


class AuthMode(Enum):
    API_KEY = "api_key"
    OAUTH = "oauth"


class Capability(Enum):
    READ_ONLY = "read-only"
    READ_WRITE = "read-write"


@dataclass(frozen=True)
class CredentialState:
    """Immutable credential configuration selected at startup."""

    mode: AuthMode
    api_key: str = field(default="", repr=False)
    client_id: str = field(default="", repr=False)
    client_secret: str = field(default="", repr=False)
    refresh_token: str = field(default="", repr=False)

    def __post_init__(self):
        if self.mode is AuthMode.API_KEY and not self.api_key:
            raise ConfigurationError("API key mode requires a non-empty API key")
        if self.mode is AuthMode.OAUTH and not (
            self.client_id and self.client_secret and self.refresh_token
        ):
            raise ConfigurationError(
                "OAuth mode requires a client id, client secret and refresh token"
            )

    @classmethod
    def from_api_key(cls, api_key: str) -> "CredentialState":
        return cls(mode=AuthMode.API_KEY, api_key=api_key)

    @classmethod
    def from_oauth(cls, client_id: str, client_secret: str, refresh_token: str) -> "CredentialState":
        return cls(
            mode=AuthMode.OAUTH,
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
        )

    @property
    def capability(self) -> Capability:
        if self.mode is AuthMode.OAUTH:
            return Capability.READ_WRITE
        return Capability.READ_ONLY


def resolve_credentials(environ: Optional[Mapping[str, str]] = None) -> CredentialState:
    """Select the credential mode from environment configuration.

    An API key takes precedence when set. Otherwise the complete OAuth triple
    (client id, client secret, refresh token) is required.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        CredentialState for the selected mode

    Raises:
        ConfigurationError: If neither mode is fully configured
    """
    api_key = get_env(ENV_API_KEY, environ)
    if api_key:
        return CredentialState.from_api_key(api_key)

    oauth = {
        name: get_env(name, environ)
        for name in (ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_REFRESH_TOKEN)
    }
    if all(oauth.values()):
        return CredentialState.from_oauth(
            oauth[ENV_CLIENT_ID], oauth[ENV_CLIENT_SECRET], oauth[ENV_REFRESH_TOKEN]
        )

    missing = [name for name, value in oauth.items() if not value]
    if len(missing) < len(oauth):
        raise ConfigurationError(
            f"Incomplete OAuth configuration, missing: {', '.join(missing)}. "
            f"Set all of {ENV_CLIENT_ID}, {ENV_CLIENT_SECRET} and {ENV_REFRESH_TOKEN}, "
            f"or set {ENV_API_KEY} for read-only access."
        )
    raise ConfigurationError(
        f"Authentication required: set either {ENV_API_KEY} or "
        f"{ENV_CLIENT_ID} + {ENV_CLIENT_SECRET} + {ENV_REFRESH_TOKEN}"
    )


@dataclass(frozen=True)
class AuthDecoration:
    """Query parameters and headers carrying credentials for one request."""

    params: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


class CredentialResolver:
    """Produces the auth decoration for outbound requests.

    In OAuth mode the bearer token is cached until shortly before it expires.
    Concurrent callers that find the cache stale may each refresh; the last
    token written wins and every token handed out is valid.
    """

    def __init__(
        self,
        state: CredentialState,
        token_uri: str = TOKEN_URI,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state = state
        self.token_uri = token_uri
        self._clock = clock
        self._access_token: Optional[str] = None
        self._expires_at = 0.0

    @property
    def capability(self) -> Capability:
        return self.state.capability

    def token_is_fresh(self) -> bool:
        return self._access_token is not None and self._clock() < self._expires_at

    async def current_auth_decoration(self, client: httpx.AsyncClient) -> AuthDecoration:
        """Return the credentials to attach to the next request.

        Args:
            client: HTTP client used if a token refresh is needed

        Raises:
            TokenRefreshFailure: If OAuth mode cannot obtain a bearer token
        """
        if self.state.mode is AuthMode.API_KEY:
            return AuthDecoration(params={"key": self.state.api_key})

        if not self.token_is_fresh():
            await self.refresh(client)
        return AuthDecoration(headers={"Authorization": f"Bearer {self._access_token}"})

    async def refresh(self, client: httpx.AsyncClient) -> str:
        """Exchange the refresh token for a new bearer token."""
        data = {
            "client_id": self.state.client_id,
            "client_secret": self.state.client_secret,
            "refresh_token": self.state.refresh_token,
            "grant_type": "refresh_token",
        }
        print("Refreshing OAuth access token", file=sys.stderr)
        try:
            response = await client.post(
                self.token_uri,
                data=data,
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                timeout=REQUEST_TIMEOUT,
            )
        except httpx.RequestError as e:
            print(f"Token refresh request failed: {str(e)}", file=sys.stderr)
            raise TokenRefreshFailure(f"OAuth token refresh failed: {str(e)}") from e

        payload = _json_or_empty(response)
        if response.is_error:
            detail = (
                safe_get(payload, "error_description")
                or safe_get(payload, "error", "message")
                or safe_get(payload, "error")
                or f"HTTP error {response.status_code}: {response.reason_phrase}"
            )
            print(f"Token refresh rejected: {response.status_code}", file=sys.stderr)
            raise TokenRefreshFailure(
                f"OAuth token refresh failed: {detail}", status_code=response.status_code
            )

        token = safe_get(payload, "access_token")
        if not token:
            raise TokenRefreshFailure("OAuth token refresh failed: response missing access_token")

        expires_in = _parse_expires_in(payload)
        self._access_token = token
        self._expires_at = self._clock() + max(expires_in - TOKEN_EXPIRY_SKEW, 0.0)
        print(f"Obtained access token valid for {int(expires_in)}s", file=sys.stderr)
        return token


def _json_or_empty(response: httpx.Response) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _parse_expires_in(payload: Dict[str, Any]) -> float:
    raw = payload.get("expires_in", 3600)
    try:
        expires_in = float(raw)
    except (TypeError, ValueError, OverflowError):
        expires_in = math.nan
    if isinstance(raw, bool) or not math.isfinite(expires_in):
        raise TokenRefreshFailure(f"OAuth token refresh failed: invalid expires_in {raw!r}")
    return expires_in
