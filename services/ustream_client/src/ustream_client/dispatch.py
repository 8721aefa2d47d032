"""Deliver completions onto the caller's designated event loop."""
import asyncio
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from ustream_client.outcome import Outcome

T = TypeVar("T")

Completion = Callable[[Outcome[T]], Any]


class Dispatcher(ABC):
    @abstractmethod
    def deliver(self, completion: Completion[T], outcome: Outcome[T]) -> None:
        """Schedule ``completion(outcome)`` on the dispatcher's context."""
        ...


class LoopDispatcher(Dispatcher):
    """Runs completions as callbacks of one "main" event loop.

    Callbacks on a loop never run concurrently with each other or with the
    loop's tasks, so completions are serialized with other work on it.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    @classmethod
    def for_running_loop(cls) -> "LoopDispatcher":
        return cls(asyncio.get_running_loop())

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def deliver(self, completion: Completion[T], outcome: Outcome[T]) -> None:
        self._loop.call_soon_threadsafe(completion, outcome)


class OnceCompletion(Generic[T]):
    """Wraps a completion so it can be delivered at most once."""

    def __init__(self, completion: Completion[T], dispatcher: Dispatcher) -> None:
        self._completion = completion
        self._dispatcher = dispatcher
        self._lock = threading.Lock()
        self._delivered = False

    @property
    def delivered(self) -> bool:
        return self._delivered

    def __call__(self, outcome: Outcome[T]) -> None:
        with self._lock:
            if self._delivered:
                raise RuntimeError("completion already delivered")
            self._delivered = True
        self._dispatcher.deliver(self._completion, outcome)
