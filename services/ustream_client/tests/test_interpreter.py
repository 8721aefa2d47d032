"""Tests for the chat reply classification chain."""
import httpx

from ustream_client.errors import (
    InvalidResponseError,
    NoDataError,
    SerializationError,
    ServerError,
    TransportError,
)
from ustream_client.interpreter import UNKNOWN_ERROR_TEXT, interpret_chat_exchange
from ustream_client.outcome import Failure, Success


def _response(status: int, content: bytes = b"") -> httpx.Response:
    return httpx.Response(status, content=content)


def test_success_returns_reply_text() -> None:
    outcome = interpret_chat_exchange(
        None, _response(200, b'{"response": "hi", "timestamp": "t"}')
    )
    assert outcome == Success("hi")


def test_missing_timestamp_is_accepted() -> None:
    outcome = interpret_chat_exchange(None, _response(200, b'{"response": "hi"}'))
    assert outcome == Success("hi")


def test_null_timestamp_is_accepted() -> None:
    outcome = interpret_chat_exchange(
        None, _response(200, b'{"response": "hi", "timestamp": null}')
    )
    assert outcome == Success("hi")


def test_transport_error_takes_precedence() -> None:
    cause = httpx.ConnectError("refused")
    outcome = interpret_chat_exchange(cause, _response(500, b"boom"))
    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, TransportError)
    assert outcome.error.cause is cause


def test_missing_response_is_invalid() -> None:
    outcome = interpret_chat_exchange(None, None)
    assert outcome == Failure(InvalidResponseError())


def test_non_200_with_plain_text_is_server_error() -> None:
    outcome = interpret_chat_exchange(None, _response(500, b"boom"))
    assert outcome == Failure(ServerError(500, "boom"))


def test_non_200_with_undecodable_body_uses_fallback_text() -> None:
    outcome = interpret_chat_exchange(None, _response(502, b"\xff\xfe\xfd"))
    assert outcome == Failure(ServerError(502, UNKNOWN_ERROR_TEXT))


def test_non_200_with_empty_body_uses_fallback_text() -> None:
    outcome = interpret_chat_exchange(None, _response(404))
    assert outcome == Failure(ServerError(404, UNKNOWN_ERROR_TEXT))


def test_non_200_with_json_body_is_still_server_error() -> None:
    outcome = interpret_chat_exchange(None, _response(400, b'{"response": "hi"}'))
    assert outcome == Failure(ServerError(400, '{"response": "hi"}'))


def test_empty_200_is_no_data() -> None:
    outcome = interpret_chat_exchange(None, _response(200))
    assert outcome == Failure(NoDataError())


def test_wrong_shape_is_serialization_error() -> None:
    outcome = interpret_chat_exchange(None, _response(200, b'{"bad": "shape"}'))
    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, SerializationError)


def test_invalid_json_is_serialization_error() -> None:
    outcome = interpret_chat_exchange(None, _response(200, b"not json"))
    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, SerializationError)


def test_explicit_body_overrides_response_content() -> None:
    outcome = interpret_chat_exchange(None, _response(200, b"ignored"), body=b"")
    assert outcome == Failure(NoDataError())
