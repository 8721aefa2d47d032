"""Tagged result of one client operation."""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ustream_client.errors import ChatClientError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: ChatClientError

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]
