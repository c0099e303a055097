"""
One-shot helper that obtains a YouTube OAuth refresh token.

Starts a local callback listener, opens the Google consent page in a browser,
exchanges the returned authorization code for tokens and prints the
environment variables to add to the MCP client settings.

Setup:
    1. Go to https://console.cloud.google.com/ and create or select a project
    2. Enable the YouTube Data API v3
    3. Create an OAuth 2.0 Client ID of type "Desktop application"
    4. Export YOUTUBE_CLIENT_ID and YOUTUBE_CLIENT_SECRET and run this script
"""

import sys

from dotenv import load_dotenv
from google_auth_oauthlib.flow import InstalledAppFlow

from constants import (
    AUTH_URI,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    ENV_REFRESH_TOKEN,
    OAUTH_REDIRECT_PORT,
    OAUTH_SCOPES,
    TOKEN_URI,
)
from utils import get_env

SUCCESS_MESSAGE = (
    "YouTube authentication completed. Check your terminal for the tokens "
    "to add to your MCP settings. You can close this window now."
)


def build_client_config(client_id: str, client_secret: str) -> dict:
    return {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": [f"http://localhost:{OAUTH_REDIRECT_PORT}/"],
        }
    }


def format_settings(client_id: str, client_secret: str, refresh_token: str) -> str:
    """Render the settings block users paste into their MCP client config."""
    return "\n".join([
        f'"{ENV_CLIENT_ID}": "{client_id}",',
        f'"{ENV_CLIENT_SECRET}": "{client_secret}",',
        f'"{ENV_REFRESH_TOKEN}": "{refresh_token}",',
    ])


def main() -> int:
    load_dotenv()
    client_id = get_env(ENV_CLIENT_ID)
    client_secret = get_env(ENV_CLIENT_SECRET)

    if not client_id or not client_secret:
        print("Missing environment variables:", file=sys.stderr)
        print(f"   {ENV_CLIENT_ID} - Get from Google Cloud Console", file=sys.stderr)
        print(f"   {ENV_CLIENT_SECRET} - Get from Google Cloud Console", file=sys.stderr)
        print(__doc__, file=sys.stderr)
        return 1

    flow = InstalledAppFlow.from_client_config(
        build_client_config(client_id, client_secret), scopes=OAUTH_SCOPES
    )

    print("Opening browser for YouTube authentication...")
    print("Please sign in with your YouTube account and grant permissions.")
    try:
        # prompt=consent forces Google to issue a refresh token every time
        credentials = flow.run_local_server(
            port=OAUTH_REDIRECT_PORT,
            access_type="offline",
            prompt="consent",
            authorization_prompt_message="If the browser does not open, visit: {url}",
            success_message=SUCCESS_MESSAGE,
        )
    except Exception as e:
        print(f"OAuth error: {str(e)}", file=sys.stderr)
        return 1

    if not credentials.refresh_token:
        print("No refresh token returned. Revoke the app's access and try again.", file=sys.stderr)
        return 1

    print()
    print("Authentication successful!")
    print()
    print("Add these to your MCP settings:")
    print()
    print(format_settings(client_id, client_secret, credentials.refresh_token))
    print()
    if credentials.token:
        print(f"Access Token (temporary): {credentials.token}")
    if credentials.expiry:
        print(f"Expires: {credentials.expiry.isoformat()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
