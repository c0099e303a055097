import datetime

import httpx

import check_access
import get_oauth_tokens
from auth import CredentialResolver
from conftest import RecordingTransport, run


class FakeCredentials:
    def __init__(self, refresh_token):
        self.refresh_token = refresh_token
        self.token = "ya29.temporary"
        self.expiry = datetime.datetime(2030, 1, 1)


class FakeFlow:
    created = []

    def __init__(self, config, scopes, refresh_token="1//refresh"):
        self.config = config
        self.scopes = scopes
        self.refresh_token = refresh_token
        self.run_kwargs = None

    @classmethod
    def from_client_config(cls, config, scopes):
        flow = cls(config, scopes)
        cls.created.append(flow)
        return flow

    def run_local_server(self, **kwargs):
        self.run_kwargs = kwargs
        return FakeCredentials(self.refresh_token)


def oauth_env(monkeypatch):
    monkeypatch.setattr(get_oauth_tokens, "load_dotenv", lambda: None)
    monkeypatch.setenv("YOUTUBE_CLIENT_ID", "cid.apps.googleusercontent.com")
    monkeypatch.setenv("YOUTUBE_CLIENT_SECRET", "shh")


def test_client_config_targets_local_callback():
    config = get_oauth_tokens.build_client_config("cid", "secret")["installed"]

    assert config["client_id"] == "cid"
    assert config["token_uri"] == "https://oauth2.googleapis.com/token"
    assert config["redirect_uris"] == ["http://localhost:3000/"]


def test_settings_block_lists_all_three_variables():
    lines = get_oauth_tokens.format_settings("cid", "secret", "refresh").splitlines()
    assert lines == [
        '"YOUTUBE_CLIENT_ID": "cid",',
        '"YOUTUBE_CLIENT_SECRET": "secret",',
        '"YOUTUBE_REFRESH_TOKEN": "refresh",',
    ]


def test_token_helper_requires_client_credentials(monkeypatch, capsys):
    monkeypatch.setattr(get_oauth_tokens, "load_dotenv", lambda: None)
    monkeypatch.delenv("YOUTUBE_CLIENT_ID", raising=False)
    monkeypatch.delenv("YOUTUBE_CLIENT_SECRET", raising=False)

    assert get_oauth_tokens.main() == 1
    assert "YOUTUBE_CLIENT_ID" in capsys.readouterr().err


def test_token_helper_prints_refresh_token(monkeypatch, capsys):
    oauth_env(monkeypatch)
    FakeFlow.created.clear()
    monkeypatch.setattr(get_oauth_tokens, "InstalledAppFlow", FakeFlow)

    assert get_oauth_tokens.main() == 0

    [flow] = FakeFlow.created
    assert flow.scopes == ["https://www.googleapis.com/auth/youtube.force-ssl"]
    assert flow.run_kwargs["port"] == 3000
    assert flow.run_kwargs["access_type"] == "offline"
    assert flow.run_kwargs["prompt"] == "consent"
    out = capsys.readouterr().out
    assert '"YOUTUBE_REFRESH_TOKEN": "1//refresh",' in out
    assert "Expires: 2030-01-01T00:00:00" in out


def test_token_helper_fails_without_refresh_token(monkeypatch):
    oauth_env(monkeypatch)

    class NoRefreshFlow(FakeFlow):
        def run_local_server(self, **kwargs):
            return FakeCredentials(None)

    monkeypatch.setattr(get_oauth_tokens, "InstalledAppFlow", NoRefreshFlow)
    assert get_oauth_tokens.main() == 1


def test_access_check_reports_the_channel(oauth_state, capsys):
    def responder(request):
        if request.url.host == "oauth2.googleapis.com":
            return httpx.Response(200, json={"access_token": "access-1", "expires_in": 3600})
        return httpx.Response(200, json={"items": [{"id": "UC1", "snippet": {"title": "My Channel"}}]})

    transport = RecordingTransport(responder)
    status = run(check_access.check_access(CredentialResolver(oauth_state), transport.client()))

    assert status == 0
    [call] = transport.api_requests
    assert dict(call.url.params) == {"part": "snippet", "mine": "true"}
    out = capsys.readouterr().out
    assert "Channel ID: UC1" in out
    assert "Channel Description: No description" in out


def test_access_check_without_channel(oauth_state, capsys):
    transport = RecordingTransport()
    status = run(check_access.check_access(CredentialResolver(oauth_state), transport.client()))

    assert status == 1
    assert "No YouTube channel found" in capsys.readouterr().out


def test_access_check_refuses_api_key_mode(monkeypatch):
    monkeypatch.setattr(check_access, "load_dotenv", lambda: None)
    monkeypatch.setenv("YOUTUBE_API_KEY", "k")

    assert run(check_access.run()) == 1
