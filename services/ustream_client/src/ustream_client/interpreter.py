"""Classify a completed chat exchange into an outcome.

The checks form a strict priority chain: a transport error beats everything,
then a missing response, then a non-200 status, then an empty body, and only
then is the body decoded. A non-200 reply with an unparsable body is therefore
reported as ``ServerError``, never as ``SerializationError``.
"""
import httpx
from pydantic import ValidationError

from ustream_client.errors import (
    InvalidResponseError,
    NoDataError,
    SerializationError,
    ServerError,
    TransportError,
)
from ustream_client.outcome import Failure, Outcome, Success
from ustream_client.schemas import ChatResponse

UNKNOWN_ERROR_TEXT = "Unknown error"


def _error_text(body: bytes | None) -> str:
    if not body:
        return UNKNOWN_ERROR_TEXT
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return UNKNOWN_ERROR_TEXT


def interpret_chat_exchange(
    transport_error: BaseException | None,
    response: httpx.Response | None,
    body: bytes | None = None,
) -> Outcome[str]:
    """Turn (transport error, response, body) into Success(reply) or Failure.

    ``body`` defaults to the already-read ``response.content``.
    """
    if transport_error is not None:
        return Failure(TransportError(transport_error))
    if not isinstance(response, httpx.Response):
        return Failure(InvalidResponseError())
    if body is None:
        body = response.content
    if response.status_code != 200:
        return Failure(ServerError(response.status_code, _error_text(body)))
    if not body:
        return Failure(NoDataError())
    try:
        chat_response = ChatResponse.model_validate_json(body)
    except ValidationError as e:
        return Failure(SerializationError(e))
    return Success(chat_response.response)
