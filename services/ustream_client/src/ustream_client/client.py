"""HTTP client to the UstreamBot chat backend."""
import asyncio
import concurrent.futures

import httpx
import structlog
from pydantic import ValidationError

from shared.http_client import create_http_client
from shared.logging import operation_context

from ustream_client.config import ClientSettings, get_settings
from ustream_client.dispatch import Completion, Dispatcher, LoopDispatcher, OnceCompletion
from ustream_client.errors import (
    InvalidURLError,
    SerializationError,
    ServerUnavailableError,
    TransportError,
)
from ustream_client.interpreter import interpret_chat_exchange
from ustream_client.outcome import Failure, Outcome, Success
from ustream_client.schemas import ChatRequest

CHAT_PATH = "/chat"
HEALTH_PATH = "/health"

log = structlog.get_logger(__name__)


class ChatClient:
    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._base_url = settings.base_url.rstrip("/")
        self._timeout = settings.chat_timeout_seconds
        self._transport = transport
        self._dispatcher = dispatcher

    @property
    def base_url(self) -> str:
        return self._base_url

    def _endpoint(self, path: str) -> httpx.URL | None:
        try:
            url = httpx.URL(f"{self._base_url}{path}")
            port = url.port
        except (httpx.InvalidURL, ValueError):
            return None
        if url.scheme not in ("http", "https") or not url.host:
            return None
        if port is not None and not 0 < port <= 65535:
            return None
        return url

    async def send_message(self, prompt: str) -> Outcome[str]:
        """POST the prompt to /chat and return the backend's reply text."""
        with operation_context():
            url = self._endpoint(CHAT_PATH)
            if url is None:
                log.debug("chat_invalid_url", base_url=self._base_url)
                return Failure(InvalidURLError())
            try:
                body = ChatRequest(prompt=prompt).model_dump_json().encode("utf-8")
            except ValidationError as e:
                return Failure(SerializationError(e))

            log.debug("chat_request", url=str(url), prompt_chars=len(prompt))
            transport_error: httpx.RequestError | None = None
            response: httpx.Response | None = None
            try:
                async with create_http_client(
                    timeout=self._timeout, transport=self._transport
                ) as client:
                    response = await client.post(
                        url,
                        content=body,
                        headers={"Content-Type": "application/json"},
                    )
            except httpx.RequestError as e:
                transport_error = e

            outcome = interpret_chat_exchange(transport_error, response)
            log.info(
                "chat_completed",
                status=response.status_code if response is not None else None,
                outcome="success" if outcome.ok else outcome.error.kind.value,
            )
            return outcome

    async def health_check(self) -> Outcome[bool]:
        """GET /health; only the status code matters, the body is never read."""
        with operation_context():
            url = self._endpoint(HEALTH_PATH)
            if url is None:
                return Failure(InvalidURLError())

            log.debug("health_request", url=str(url))
            try:
                async with create_http_client(transport=self._transport) as client:
                    async with client.stream("GET", url) as response:
                        status = response.status_code
            except httpx.RequestError as e:
                log.info("health_completed", outcome="transport_error")
                return Failure(TransportError(e))

            log.info("health_completed", status=status)
            if status != 200:
                return Failure(ServerUnavailableError())
            return Success(True)

    def submit_message(
        self,
        prompt: str,
        completion: Completion[str],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> concurrent.futures.Future:
        """Callback form of ``send_message``.

        ``completion`` is called exactly once, on the dispatcher's context.
        Safe to call from a thread other than ``loop``'s when ``loop`` is given.
        """
        return self._submit(self.send_message(prompt), completion, loop)

    def submit_health_check(
        self,
        completion: Completion[bool],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> concurrent.futures.Future:
        """Callback form of ``health_check``."""
        return self._submit(self.health_check(), completion, loop)

    def _submit(self, coro, completion, loop):
        try:
            loop = loop or asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        dispatcher = self._dispatcher or LoopDispatcher(loop)
        once = OnceCompletion(completion, dispatcher)

        def _done(fut: concurrent.futures.Future) -> None:
            if fut.cancelled():
                once(Failure(TransportError(asyncio.CancelledError())))
                return
            exc = fut.exception()
            if exc is not None:
                once(Failure(TransportError(exc)))
                return
            once(fut.result())

        future = asyncio.run_coroutine_threadsafe(coro, loop)
        future.add_done_callback(_done)
        return future
