"""
Checks that the configured OAuth credentials can act on a YouTube channel.

Refreshes an access token, then lists the authorized account's own channel.
"""

import asyncio
import sys

import httpx
from dotenv import load_dotenv

from api_client import make_youtube_request
from auth import AuthMode, CredentialResolver, resolve_credentials
from errors import ConfigurationError, UpstreamFailure
from utils import safe_get


async def check_access(resolver: CredentialResolver, client: httpx.AsyncClient) -> int:
    print("1. Getting access token...")
    auth = await resolver.current_auth_decoration(client)
    print("Token obtained successfully")

    print("2. Checking for YouTube channel...")
    data = await make_youtube_request(
        client, "GET", "channels", auth, {"part": "snippet", "mine": True}
    )

    items = safe_get(data, "items", default=[])
    if not items:
        print()
        print("No YouTube channel found for this Google account.")
        print("Public data can still be read, but comments cannot be posted or replied to.")
        print("Create a channel for this account, or authorize an account that has one.")
        return 1

    channel = items[0]
    print()
    print("SUCCESS! You have write access to:")
    print(f"Channel ID: {channel.get('id')}")
    print(f"Channel Title: {safe_get(channel, 'snippet', 'title', default='Unknown')}")
    print(f"Channel Description: {safe_get(channel, 'snippet', 'description') or 'No description'}")
    return 0


async def run() -> int:
    load_dotenv()
    print("Checking YouTube OAuth access...")
    try:
        state = resolve_credentials()
    except ConfigurationError as e:
        print(f"Missing OAuth credentials: {str(e)}", file=sys.stderr)
        return 1
    if state.mode is not AuthMode.OAUTH:
        print("YOUTUBE_API_KEY is set; unset it to check OAuth access.", file=sys.stderr)
        return 1

    async with httpx.AsyncClient() as client:
        try:
            return await check_access(CredentialResolver(state), client)
        except UpstreamFailure as e:
            print(f"Access check failed: {str(e)}", file=sys.stderr)
            if e.status_code == 403:
                print("Common reasons: no channel on the account, channel not verified "
                      "for API access, or insufficient OAuth scopes.", file=sys.stderr)
            return 1


def main() -> int:
    return asyncio.run(run())


if __name__ == "__main__":
    raise SystemExit(main())
