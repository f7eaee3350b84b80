"""Error types."""

from __future__ import annotations

from enum import Enum


class SerializerKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    IMMUTABLE_OBJECT = "immutable_object"
    IMMUTABLE_ARRAY = "immutable_array"


_DECODING_FAILED_MESSAGES: dict[SerializerKind, str] = {
    SerializerKind.OBJECT: "failed to serialize response into object",
    SerializerKind.ARRAY: "failed to serialize response into array",
    SerializerKind.IMMUTABLE_OBJECT: "failed to serialize response into immutable object",
    SerializerKind.IMMUTABLE_ARRAY: "failed to serialize response into immutable array",
}


class ObjectMapperError(Exception):
    """Base exception for this package."""


class ClientClosedError(ObjectMapperError):
    """Raised when client is used after close."""


class MappingError(ObjectMapperError):
    """Raised by the mapping layer when a JSON value cannot be mapped."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class ResponseValidationError(ObjectMapperError):
    """Response content type is not one of the accepted types."""

    def __init__(self, message: str, *, content_type: str | None = None) -> None:
        super().__init__(message)
        self.content_type = content_type


class DecodingFailedError(ObjectMapperError):
    """Response body could not be turned into the requested target."""

    def __init__(self, kind: SerializerKind) -> None:
        super().__init__(_DECODING_FAILED_MESSAGES[kind])
        self.kind = kind


def decoding_failed_message(kind: SerializerKind) -> str:
    return _DECODING_FAILED_MESSAGES[kind]


__all__ = [
    "SerializerKind",
    "ObjectMapperError",
    "ClientClosedError",
    "MappingError",
    "ResponseValidationError",
    "DecodingFailedError",
    "decoding_failed_message",
]
