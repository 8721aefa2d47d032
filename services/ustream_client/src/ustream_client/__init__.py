"""Client for the UstreamBot chat backend."""
from ustream_client.client import ChatClient
from ustream_client.config import ClientSettings
from ustream_client.dispatch import Dispatcher, LoopDispatcher
from ustream_client.errors import (
    ChatClientError,
    ErrorKind,
    InvalidResponseError,
    InvalidURLError,
    NoDataError,
    SerializationError,
    ServerError,
    ServerUnavailableError,
    TransportError,
)
from ustream_client.outcome import Failure, Outcome, Success

__all__ = [
    "ChatClient",
    "ChatClientError",
    "ClientSettings",
    "Dispatcher",
    "ErrorKind",
    "Failure",
    "InvalidResponseError",
    "InvalidURLError",
    "LoopDispatcher",
    "NoDataError",
    "Outcome",
    "SerializationError",
    "ServerError",
    "ServerUnavailableError",
    "Success",
    "TransportError",
]
