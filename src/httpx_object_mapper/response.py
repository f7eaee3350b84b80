"""Response containers shared by sync and async requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class RawResponse:
    """What a serializer sees of one HTTP exchange."""

    request: httpx.Request | None
    response: httpx.Response | None
    data: bytes | None
    error: Exception | None = None

    @classmethod
    def from_httpx(cls, request: httpx.Request, response: httpx.Response) -> "RawResponse":
        return cls(request=request, response=response, data=response.content)

    @classmethod
    def from_error(cls, request: httpx.Request, error: Exception) -> "RawResponse":
        return cls(request=request, response=None, data=None, error=error)

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code


@dataclass(slots=True, frozen=True)
class DataResponse(Generic[T]):
    """Serialization outcome: holds either ``value`` or ``error``."""

    request: httpx.Request | None
    response: httpx.Response | None
    data: bytes | None
    value: T | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = [
    "RawResponse",
    "DataResponse",
]
