"""Error kinds surfaced by the chat client.

Every failure is returned to the caller as one of these values inside a
``Failure`` outcome. ``str(error)`` is the human-readable description.
"""
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    SERIALIZATION = "serialization_error"
    TRANSPORT = "transport_error"
    INVALID_RESPONSE = "invalid_response"
    NO_DATA = "no_data"
    SERVER_ERROR = "server_error"
    SERVER_UNAVAILABLE = "server_unavailable"


class ChatClientError(Exception):
    """Base class for all chat client errors."""

    kind: ErrorKind

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidURLError(ChatClientError):
    kind = ErrorKind.INVALID_URL

    def __str__(self) -> str:
        return "Invalid server URL"


class SerializationError(ChatClientError):
    """JSON encoding of the request or decoding of the reply failed."""

    kind = ErrorKind.SERIALIZATION

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"Failed to process server data: {self.cause}"


class TransportError(ChatClientError):
    """Failure below HTTP semantics: DNS, connect, TLS, timeout or cancellation."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        detail = str(self.cause) or type(self.cause).__name__
        return f"Network error: {detail}"


class InvalidResponseError(ChatClientError):
    kind = ErrorKind.INVALID_RESPONSE

    def __str__(self) -> str:
        return "Invalid server response"


class NoDataError(ChatClientError):
    kind = ErrorKind.NO_DATA

    def __str__(self) -> str:
        return "No data received from server"


class ServerError(ChatClientError):
    kind = ErrorKind.SERVER_ERROR

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"Server error ({self.status_code}): {self.message}"


class ServerUnavailableError(ChatClientError):
    kind = ErrorKind.SERVER_UNAVAILABLE

    def __str__(self) -> str:
        return "Server is currently unavailable"
