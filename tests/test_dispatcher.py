import asyncio
import json

import httpx
import pytest

from auth import CredentialResolver
from conftest import FakeClock, RecordingTransport, request_body, run
from dispatcher import Dispatcher, ToolResponse, partition_arguments
from errors import PermissionDenied
from tools import find_operation, list_operations

COMMENT_BODY = {
    "snippet": {
        "videoId": "V1",
        "topLevelComment": {"snippet": {"textOriginal": "hello"}},
    }
}


def test_unknown_operation_makes_no_call(read_write_dispatcher, transport):
    response = run(read_write_dispatcher.invoke("videos_explode", {"id": "x"}))

    assert response.is_error
    assert response.error == "Unknown tool: videos_explode"
    assert transport.requests == []


def test_write_operation_is_denied_for_read_only_credentials(read_only_dispatcher, transport):
    response = run(read_only_dispatcher.invoke("videos_delete", {"id": "abc123"}))

    assert response.is_error
    assert "requires OAuth" in response.error
    assert "YOUTUBE_REFRESH_TOKEN" in response.error
    assert transport.requests == []


def test_every_write_operation_is_gated(read_only_dispatcher, transport):
    for op in list_operations():
        if op.requires_write:
            with pytest.raises(PermissionDenied, match="requires OAuth"):
                read_only_dispatcher.prepare(op.name, _minimal_arguments(op))
    assert transport.requests == []


def test_missing_required_field_makes_no_call(read_write_dispatcher, transport):
    response = run(read_write_dispatcher.invoke("commentThreads_insert", {"part": "snippet"}))

    assert response.is_error
    assert response.error == "arguments: 'body' is a required property"
    assert transport.requests == []


def test_validation_runs_before_the_capability_gate(read_only_dispatcher):
    response = run(read_only_dispatcher.invoke("videos_delete", {}))
    assert response.error == "arguments: 'id' is a required property"


def test_comment_thread_insert_round_trip(read_write_dispatcher, transport):
    def responder(request):
        if request.url.host == "oauth2.googleapis.com":
            return httpx.Response(200, json={"access_token": "access-1", "expires_in": 3600})
        return httpx.Response(200, json={
            "method": request.method,
            "path": request.url.path,
            "params": dict(request.url.params),
            "body": request_body(request),
        })

    transport.responder = responder
    response = run(read_write_dispatcher.invoke(
        "commentThreads_insert", {"part": "snippet", "body": COMMENT_BODY}
    ))

    assert not response.is_error
    [call] = transport.api_requests
    assert call.method == "POST"
    assert call.url.path == "/youtube/v3/commentThreads"
    assert dict(call.url.params) == {"part": "snippet"}
    assert request_body(call) == COMMENT_BODY
    assert call.headers["Authorization"] == "Bearer access-1"
    echoed = json.loads(response.text)
    assert echoed["body"] == COMMENT_BODY


def test_api_key_scenario(read_only_dispatcher, transport):
    listed = run(read_only_dispatcher.invoke("videos_list", {"part": "snippet", "id": "abc123"}))
    deleted = run(read_only_dispatcher.invoke("videos_delete", {"id": "abc123"}))

    assert not listed.is_error
    assert json.loads(listed.text) == {"kind": "youtube#listResponse", "items": []}
    [call] = transport.requests
    assert call.method == "GET"
    assert call.url.path == "/youtube/v3/videos"
    assert dict(call.url.params) == {"part": "snippet", "id": "abc123", "key": "test-key"}
    assert "Authorization" not in call.headers
    assert deleted.is_error


def test_expired_token_is_refreshed_exactly_once_before_the_call(oauth_state, transport):
    clock = FakeClock()
    resolver = CredentialResolver(oauth_state, clock=clock)
    dispatcher = Dispatcher(resolver, client=transport.client())

    run(dispatcher.invoke("channels_list", {"part": "id", "mine": True}))
    clock.now += 7200
    run(dispatcher.invoke("channels_list", {"part": "id", "mine": True}))

    hosts = [r.url.host for r in transport.requests]
    assert hosts == [
        "oauth2.googleapis.com",
        "youtube.googleapis.com",
        "oauth2.googleapis.com",
        "youtube.googleapis.com",
    ]
    assert transport.api_requests[0].url.params["mine"] == "true"


def test_refresh_failure_blocks_the_resource_call(read_write_dispatcher, transport):
    transport.responder = lambda request: httpx.Response(401, json={"error": "invalid_client"})

    response = run(read_write_dispatcher.invoke("videos_list", {"part": "id", "chart": "mostPopular"}))

    assert response.is_error
    assert response.error == "OAuth token refresh failed: invalid_client"
    assert len(transport.token_requests) == 1
    assert transport.api_requests == []


def test_no_caching_between_identical_invocations(read_only_dispatcher, transport):
    args = {"part": "snippet", "id": "abc123"}
    first = run(read_only_dispatcher.invoke("videos_list", args))
    second = run(read_only_dispatcher.invoke("videos_list", args))

    assert first == second
    assert len(transport.requests) == 2
    assert str(transport.requests[0].url) == str(transport.requests[1].url)
    assert transport.requests[0].method == transport.requests[1].method


def test_concurrent_invocations_are_independent(read_only_dispatcher, transport):
    async def both():
        return await asyncio.gather(
            read_only_dispatcher.invoke("videos_list", {"part": "id", "id": "a"}),
            read_only_dispatcher.invoke("videos_list", {"part": "id", "id": "b"}),
        )

    results = run(both())

    assert [r.is_error for r in results] == [False, False]
    assert sorted(r.url.params["id"] for r in transport.requests) == ["a", "b"]


def test_upstream_error_message_is_surfaced(read_only_dispatcher, transport):
    transport.responder = lambda request: httpx.Response(
        403, json={"error": {"code": 403, "message": "The request cannot be completed because you have exceeded your quota."}}
    )

    response = run(read_only_dispatcher.invoke("search_list", {"part": "snippet", "q": "cats"}))

    assert response.is_error
    assert response.error == (
        "YouTube API error: The request cannot be completed because you have exceeded your quota."
    )


def test_caption_download_substitutes_path_and_returns_text(read_write_dispatcher, transport):
    def responder(request):
        if request.url.host == "oauth2.googleapis.com":
            return httpx.Response(200, json={"access_token": "access-1", "expires_in": 3600})
        return httpx.Response(200, text="1\n00:00:00,000 --> 00:00:01,000\nhi\n")

    transport.responder = responder
    response = run(read_write_dispatcher.invoke("captions_download", {"id": "cap/1", "tfmt": "srt"}))

    [call] = transport.api_requests
    assert call.url.raw_path.decode().startswith("/youtube/v3/captions/cap%2F1?")
    assert dict(call.url.params) == {"tfmt": "srt"}
    assert response.text.startswith("1\n00:00:00,000")


def test_empty_response_uses_success_message(read_write_dispatcher, transport):
    def responder(request):
        if request.url.host == "oauth2.googleapis.com":
            return httpx.Response(200, json={"access_token": "access-1", "expires_in": 3600})
        return httpx.Response(204)

    transport.responder = responder
    rated = run(read_write_dispatcher.invoke("videos_rate", {"id": "V1", "rating": "like"}))
    deleted = run(read_write_dispatcher.invoke("playlists_delete", {"id": "PL1"}))

    assert rated.text == "Video V1 rated: like"
    assert deleted.text == "Playlist PL1 deleted successfully"
    assert transport.api_requests[0].method == "POST"
    assert dict(transport.api_requests[0].url.params) == {"id": "V1", "rating": "like"}
    assert transport.api_requests[1].method == "DELETE"


def test_partition_drops_none_and_splits_body():
    op = find_operation("playlists_insert")
    endpoint, params, body = partition_arguments(op, {
        "part": "snippet",
        "onBehalfOfContentOwner": None,
        "body": {"snippet": {"title": "t"}},
    })

    assert endpoint == "playlists"
    assert params == {"part": "snippet"}
    assert body == {"snippet": {"title": "t"}}


def test_response_envelope_shape():
    assert ToolResponse.success("ok").as_dict() == {
        "content": [{"type": "text", "text": "ok"}],
        "isError": False,
    }
    assert ToolResponse.failure("nope").as_dict()["isError"] is True


def test_dispatcher_opens_its_own_client_when_none_injected(api_key_state, monkeypatch):
    transport = RecordingTransport()
    real_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(transport)
        return real_client(*args, **kwargs)

    monkeypatch.setattr("dispatcher.httpx.AsyncClient", client_factory)
    dispatcher = Dispatcher(CredentialResolver(api_key_state))

    response = run(dispatcher.invoke("i18nRegions_list", {"part": "snippet", "hl": "en"}))

    assert not response.is_error
    assert transport.requests[0].url.path == "/youtube/v3/i18nRegions"


def _minimal_arguments(op):
    schema = op.input_schema
    return {name: _sample(schema["properties"][name]) for name in schema["required"]}


def _sample(field):
    if "enum" in field:
        return field["enum"][0]
    kind = field.get("type")
    if kind == "object":
        return {name: _sample(field["properties"][name]) for name in field.get("required", [])}
    return {"string": "x", "integer": 1, "number": 1, "boolean": True, "array": []}[kind]


def test_huge_integer_is_an_invalid_argument_response(read_only_dispatcher, transport):
    response = run(read_only_dispatcher.invoke("videos_list", {"part": "id", "maxResults": 10 ** 400}))

    assert response.is_error
    assert response.error.startswith("maxResults: ")
    assert transport.requests == []


def test_unexpected_exception_becomes_a_failure(read_only_dispatcher, transport):
    def responder(request):
        raise RuntimeError("boom")

    transport.responder = responder
    response = run(read_only_dispatcher.invoke("videos_list", {"part": "id", "id": "abc123"}))

    assert response.is_error
    assert response.error == "Unexpected error in videos_list: boom"


def test_integral_float_is_sent_as_integer(read_only_dispatcher, transport):
    response = run(read_only_dispatcher.invoke("videos_list", {"part": "id", "chart": "mostPopular", "maxResults": 5.0}))

    assert not response.is_error
    assert transport.requests[0].url.params["maxResults"] == "5"
