"""Asynchronous data request with response handler registration."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Container, Sequence
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any

import httpx

from .core.extraction import DEFAULT_KEY_PATH_SEPARATOR
from .request_shared import Validator, apply_validators, build_data_response, build_validators
from .response import DataResponse, RawResponse
from .serializers import ResponseSerializer, build_array_serializer, build_object_serializer

if TYPE_CHECKING:
    from .async_client import AsyncObjectMapperClient

logger = logging.getLogger("httpx_object_mapper")

AsyncCompletionHandler = Callable[[DataResponse[Any]], "Awaitable[object] | object"]


class AsyncDataRequest:
    """Async counterpart of ``DataRequest``."""

    def __init__(
        self,
        owner: "AsyncObjectMapperClient",
        client: httpx.AsyncClient,
        request: httpx.Request,
        *,
        separator: str = DEFAULT_KEY_PATH_SEPARATOR,
    ) -> None:
        self._owner = owner
        self._client = client
        self._request = request
        self._separator = separator
        self._validators: list[Validator] = []
        self._raw: RawResponse | None = None
        self._lock = asyncio.Lock()

    @property
    def request(self) -> httpx.Request:
        return self._request

    def validate(
        self,
        status_codes: Container[int] | None = None,
        content_types: Sequence[str] | None = None,
    ) -> "AsyncDataRequest":
        self._validators.extend(build_validators(status_codes, content_types))
        return self

    async def send(self) -> RawResponse:
        async with self._lock:
            if self._raw is not None:
                return self._raw
            self._owner._ensure_open()
            method = self._request.method
            url = str(self._request.url)
            logger.debug("request start method=%s url=%s", method, url)
            try:
                response = await self._client.send(self._request)
            except httpx.RequestError as exc:
                logger.warning(
                    "request transport error method=%s url=%s error=%s",
                    method,
                    url,
                    exc.__class__.__name__,
                )
                self._raw = RawResponse.from_error(self._request, exc)
                return self._raw
            logger.debug(
                "response received method=%s url=%s http_status=%s",
                method,
                url,
                response.status_code,
            )
            self._raw = RawResponse.from_httpx(self._request, response)
            return self._raw

    async def response(
        self,
        serializer: ResponseSerializer[Any],
        completion_handler: AsyncCompletionHandler | None = None,
        *,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        raw = apply_validators(await self.send(), self._validators)
        data_response = build_data_response(raw, serializer)
        if completion_handler is not None:
            await _deliver(completion_handler, data_response, executor)
        return data_response

    async def response_object(
        self,
        target: type[Any],
        *,
        key_path: str | None = None,
        map_to_object: object | None = None,
        context: object | None = None,
        completion_handler: AsyncCompletionHandler | None = None,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        serializer = build_object_serializer(
            target,
            key_path=key_path,
            obj=map_to_object,
            context=context,
            separator=self._separator,
        )
        return await self.response(serializer, completion_handler, executor=executor)

    async def response_array(
        self,
        target: type[Any],
        *,
        key_path: str | None = None,
        context: object | None = None,
        completion_handler: AsyncCompletionHandler | None = None,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        serializer = build_array_serializer(
            target,
            key_path=key_path,
            context=context,
            separator=self._separator,
        )
        return await self.response(serializer, completion_handler, executor=executor)


async def _deliver(
    handler: AsyncCompletionHandler,
    data_response: DataResponse[Any],
    executor: Executor | None,
) -> None:
    if executor is not None and not inspect.iscoroutinefunction(handler):
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(executor, handler, data_response)
        return
    result = handler(data_response)
    if inspect.isawaitable(result):
        await result


__all__ = [
    "AsyncCompletionHandler",
    "AsyncDataRequest",
]
