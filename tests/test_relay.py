"""Tests for AnswerRelay: validation, the provider call, and outcome mapping."""

import json

import pytest
import requests

from healthbot.config import FALLBACK_ANSWER, SYSTEM_INSTRUCTION
from healthbot.relay.errors import BadRequest, RemoteError, ServerError
from healthbot.relay.relay import AnswerRelay


def _body(messages):
    return json.dumps({"messages": messages})


def test_answer_returns_first_candidate_text(relay):
    result = relay.answer(_body([{"role": "user", "content": "Is water good for me?"}]))
    assert result.answer == "Drink water."


def test_posts_once_to_generate_content(relay, provider_session):
    relay.answer(_body([{"role": "user", "content": "Hi"}]))

    assert provider_session.post.call_count == 1
    args, kwargs = provider_session.post.call_args
    assert args[0] == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert kwargs["headers"] == {"X-goog-api-key": "test-key"}
    assert kwargs["timeout"] is None
    assert kwargs["json"]["contents"][0]["parts"] == [
        {"text": SYSTEM_INSTRUCTION},
        {"text": "Hi"},
    ]


def test_missing_api_key_is_sent_empty(relay, provider_session, monkeypatch):
    """The key is not validated locally; the provider decides."""
    monkeypatch.delenv("GEMINI_API_KEY")
    relay.answer(_body([]))
    assert provider_session.post.call_args.kwargs["headers"] == {"X-goog-api-key": ""}


def test_empty_messages_sends_greeting(relay, provider_session):
    relay.answer(_body([]))
    parts = provider_session.post.call_args.kwargs["json"]["contents"][0]["parts"]
    assert parts == [{"text": SYSTEM_INSTRUCTION}, {"text": "Hello!"}]


def test_provider_error_is_passed_through(relay, provider_session, make_response):
    provider_session.post.return_value = make_response(429, text="rate limited")

    with pytest.raises(RemoteError) as exc_info:
        relay.answer(_body([{"role": "user", "content": "Hi"}]))

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "rate limited"


def test_provider_error_is_not_retried(relay, provider_session, make_response):
    provider_session.post.return_value = make_response(503, text="unavailable")

    with pytest.raises(RemoteError):
        relay.answer(_body([]))

    assert provider_session.post.call_count == 1


def test_missing_candidates_uses_fallback(relay, provider_session, make_response):
    provider_session.post.return_value = make_response(json_body={"promptFeedback": {}})
    assert relay.answer(_body([])).answer == FALLBACK_ANSWER


def test_transport_failure_is_server_error(relay, provider_session):
    provider_session.post.side_effect = requests.exceptions.ConnectionError("boom")

    with pytest.raises(ServerError) as exc_info:
        relay.answer(_body([]))

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Server error"


def test_undecodable_provider_body_is_server_error(relay, provider_session, make_response):
    response = make_response()
    response.json.side_effect = ValueError("not json")
    provider_session.post.return_value = response

    with pytest.raises(ServerError):
        relay.answer(_body([]))


@pytest.mark.parametrize("body", [
    "{}",
    '{"history": []}',
    '{"messages": "hello"}',
    '{"messages": {"role": "user"}}',
    '{"messages": null}',
    "[]",
])
def test_parse_request_rejects_missing_messages(body):
    with pytest.raises(BadRequest) as exc_info:
        AnswerRelay.parse_request(body)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid request format"


@pytest.mark.parametrize("odd_entry", [
    {"content": "no role"},
    {"role": 7, "content": "numeric role"},
    {"role": "bot", "content": None},
    "stray",
    None,
    ["user", "hi"],
])
def test_parse_request_drops_non_user_entries(odd_entry):
    request = AnswerRelay.parse_request(_body([odd_entry, {"role": "user", "content": "hi"}]))
    assert [(m.role, m.content) for m in request.messages] == [("user", "hi")]


def test_parse_request_stringifies_user_content():
    request = AnswerRelay.parse_request(_body([
        {"role": "user", "content": 42},
        {"role": "user", "content": None},
    ]))
    assert [m.content for m in request.messages] == ["42", ""]


def test_redirect_status_is_passed_through(relay, provider_session, make_response):
    provider_session.post.return_value = make_response(302, text="moved")

    with pytest.raises(RemoteError) as exc_info:
        relay.answer(_body([]))

    assert exc_info.value.status_code == 302
    assert exc_info.value.message == "moved"


def test_parse_request_defaults_missing_content():
    request = AnswerRelay.parse_request(_body([{"role": "user"}]))
    assert request.messages[0].content == ""


def test_parse_request_non_json_is_server_error():
    with pytest.raises(ServerError):
        AnswerRelay.parse_request(b"{not json")


def test_bad_request_never_reaches_provider(relay, provider_session):
    with pytest.raises(BadRequest):
        relay.answer("{}")
    provider_session.post.assert_not_called()


def test_same_request_same_answer(relay):
    body = _body([{"role": "user", "content": "Should I stretch?"}])
    assert relay.answer(body) == relay.answer(body)
