from unittest.mock import MagicMock

import pytest
import requests

from saathi.assistant.client import GENERIC_SERVER_ERROR, ChatClient, ChatError, ChatReply

def make_response(status_code=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp

def make_client(response=None, error=None):
    session = MagicMock()
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    client = ChatClient(base_url="http://chat.local:5000/", user_id="guest_user", timeout_s=None, session=session)
    return client, session

def test_send_posts_expected_payload():
    client, session = make_client(make_response(200, {"conversationId": "c-1", "aiResponse": "नमस्ते"}))
    reply = client.send("बिजली नहीं है", None, "hi-IN")

    assert reply == ChatReply("c-1", "नमस्ते")
    args, kwargs = session.post.call_args
    assert args[0] == "http://chat.local:5000/api/chat"
    assert kwargs["json"] == {
        "userId": "guest_user",
        "message": "बिजली नहीं है",
        "conversationId": None,
        "languageTag": "hi-IN",
    }

def test_non_200_uses_server_error_field():
    client, _ = make_client(make_response(500, {"error": "LLM quota exceeded"}))
    with pytest.raises(ChatError) as exc:
        client.send("hello", "c-1", "en-IN")
    assert str(exc.value) == "LLM quota exceeded"
    assert exc.value.status_code == 500

def test_non_200_without_error_field():
    client, _ = make_client(make_response(404, {}))
    with pytest.raises(ChatError) as exc:
        client.send("hello", None, "en-IN")
    assert str(exc.value) == GENERIC_SERVER_ERROR

def test_transport_failure():
    client, session = make_client(error=requests.ConnectionError("Connection refused"))
    with pytest.raises(ChatError) as exc:
        client.send("hello", None, "en-IN")
    assert "Connection refused" in str(exc.value)
    assert exc.value.status_code is None
    # single attempt, no retry
    assert session.post.call_count == 1

def test_invalid_json_body():
    client, _ = make_client(make_response(502, json_error=ValueError("Expecting value")))
    with pytest.raises(ChatError) as exc:
        client.send("hello", None, "en-IN")
    assert exc.value.status_code == 502

@pytest.mark.parametrize("payload", [None, [], "ok", 42])
def test_success_body_must_be_an_object(payload):
    client, _ = make_client(make_response(200, payload))
    with pytest.raises(ChatError) as exc:
        client.send("hello", None, "en-IN")
    assert str(exc.value) == "Invalid JSON from chat backend"
    assert exc.value.status_code == 200
