"""Shared helpers for sync/async data requests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Container, Sequence
from dataclasses import dataclass
from fnmatch import fnmatch
from typing import Any

import httpx

from .core.errors import ResponseValidationError
from .response import DataResponse, RawResponse
from .serializers import ResponseSerializer

logger = logging.getLogger("httpx_object_mapper")

DEFAULT_ACCEPTABLE_STATUS_CODES: Container[int] = range(200, 300)

Validator = Callable[[RawResponse], Exception | None]


@dataclass(slots=True, frozen=True)
class StatusCodeValidator:
    status_codes: Container[int] = DEFAULT_ACCEPTABLE_STATUS_CODES

    def __call__(self, raw: RawResponse) -> Exception | None:
        if raw.response is None or raw.response.status_code in self.status_codes:
            return None
        return httpx.HTTPStatusError(
            f"response status code {raw.response.status_code} is not acceptable",
            request=raw.request,
            response=raw.response,
        )


@dataclass(slots=True, frozen=True)
class ContentTypeValidator:
    content_types: tuple[str, ...]

    def __call__(self, raw: RawResponse) -> Exception | None:
        if raw.response is None or not raw.data:
            return None
        header = raw.response.headers.get("content-type")
        if header is None:
            return ResponseValidationError("response content type is missing")
        mime = header.split(";", 1)[0].strip().lower()
        if any(fnmatch(mime, pattern.lower()) for pattern in self.content_types):
            return None
        return ResponseValidationError(
            f"response content type {mime!r} is not acceptable",
            content_type=mime,
        )


def build_validators(
    status_codes: Container[int] | None,
    content_types: Sequence[str] | None,
) -> list[Validator]:
    if status_codes is None:
        status_codes = DEFAULT_ACCEPTABLE_STATUS_CODES
    validators: list[Validator] = [StatusCodeValidator(status_codes)]
    if content_types:
        validators.append(ContentTypeValidator(tuple(content_types)))
    return validators


def apply_validators(raw: RawResponse, validators: Sequence[Validator]) -> RawResponse:
    """Return ``raw`` with the first validation failure recorded as its error."""

    if raw.error is not None:
        return raw
    for validator in validators:
        error = validator(raw)
        if error is not None:
            logger.debug(
                "response validation failed url=%s status=%s error=%s",
                _url_of(raw),
                raw.status_code,
                error.__class__.__name__,
            )
            return RawResponse(
                request=raw.request,
                response=raw.response,
                data=raw.data,
                error=error,
            )
    return raw


def build_data_response(raw: RawResponse, serializer: ResponseSerializer[Any]) -> DataResponse[Any]:
    try:
        value = serializer.serialize(raw.request, raw.response, raw.data, raw.error)
    except Exception as exc:
        return DataResponse(
            request=raw.request,
            response=raw.response,
            data=raw.data,
            error=exc,
        )
    logger.info("response serialized url=%s status=%s", _url_of(raw), raw.status_code)
    return DataResponse(
        request=raw.request,
        response=raw.response,
        data=raw.data,
        value=value,
    )


def _url_of(raw: RawResponse) -> str | None:
    if raw.request is None:
        return None
    return str(raw.request.url)


__all__ = [
    "DEFAULT_ACCEPTABLE_STATUS_CODES",
    "Validator",
    "StatusCodeValidator",
    "ContentTypeValidator",
    "build_validators",
    "apply_validators",
    "build_data_response",
]
