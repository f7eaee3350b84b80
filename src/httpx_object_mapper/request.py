"""Synchronous data request with response handler registration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Container, Sequence
from concurrent.futures import Executor, Future
from typing import TYPE_CHECKING, Any

import httpx

from .core.extraction import DEFAULT_KEY_PATH_SEPARATOR
from .request_shared import Validator, apply_validators, build_data_response, build_validators
from .response import DataResponse, RawResponse
from .serializers import ResponseSerializer, build_array_serializer, build_object_serializer

if TYPE_CHECKING:
    from .client import ObjectMapperClient

logger = logging.getLogger("httpx_object_mapper")

CompletionHandler = Callable[[DataResponse[Any]], object]


class DataRequest:
    """One HTTP request whose response can be handled by several serializers.

    The request is sent on the first handler registration and the raw result is
    reused by every later handler.
    """

    def __init__(
        self,
        owner: "ObjectMapperClient",
        client: httpx.Client,
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
        self._lock = threading.Lock()

    @property
    def request(self) -> httpx.Request:
        return self._request

    def validate(
        self,
        status_codes: Container[int] | None = None,
        content_types: Sequence[str] | None = None,
    ) -> "DataRequest":
        self._validators.extend(build_validators(status_codes, content_types))
        return self

    def send(self) -> RawResponse:
        with self._lock:
            if self._raw is None:
                self._raw = self._send_once()
            return self._raw

    def _send_once(self) -> RawResponse:
        self._owner._ensure_open()
        method = self._request.method
        url = str(self._request.url)
        logger.debug("request start method=%s url=%s", method, url)
        try:
            response = self._client.send(self._request)
        except httpx.RequestError as exc:
            logger.warning(
                "request transport error method=%s url=%s error=%s",
                method,
                url,
                exc.__class__.__name__,
            )
            return RawResponse.from_error(self._request, exc)
        logger.debug(
            "response received method=%s url=%s http_status=%s",
            method,
            url,
            response.status_code,
        )
        return RawResponse.from_httpx(self._request, response)

    def response(
        self,
        serializer: ResponseSerializer[Any],
        completion_handler: CompletionHandler | None = None,
        *,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        raw = apply_validators(self.send(), self._validators)
        data_response = build_data_response(raw, serializer)
        if completion_handler is not None:
            if executor is not None:
                future = executor.submit(completion_handler, data_response)
                future.add_done_callback(_log_handler_failure)
            else:
                completion_handler(data_response)
        return data_response

    def response_object(
        self,
        target: type[Any],
        *,
        key_path: str | None = None,
        map_to_object: object | None = None,
        context: object | None = None,
        completion_handler: CompletionHandler | None = None,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        serializer = build_object_serializer(
            target,
            key_path=key_path,
            obj=map_to_object,
            context=context,
            separator=self._separator,
        )
        return self.response(serializer, completion_handler, executor=executor)

    def response_array(
        self,
        target: type[Any],
        *,
        key_path: str | None = None,
        context: object | None = None,
        completion_handler: CompletionHandler | None = None,
        executor: Executor | None = None,
    ) -> DataResponse[Any]:
        serializer = build_array_serializer(
            target,
            key_path=key_path,
            context=context,
            separator=self._separator,
        )
        return self.response(serializer, completion_handler, executor=executor)


def _log_handler_failure(future: "Future[object]") -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error(
            "completion handler failed error=%s",
            error.__class__.__name__,
            exc_info=error,
        )


__all__ = [
    "CompletionHandler",
    "DataRequest",
]
