"""Response serializers that map JSON bodies onto typed objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import httpx

from .core.errors import DecodingFailedError, MappingError, SerializerKind
from .core.extraction import DEFAULT_KEY_PATH_SEPARATOR, process_response
from .mapping.mapper import ImmutableMapper, Mapper, is_immutable_target

logger = logging.getLogger("httpx_object_mapper")

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ResponseSerializer(Protocol[T_co]):
    def serialize(
        self,
        request: httpx.Request | None,
        response: httpx.Response | None,
        data: bytes | None,
        error: Exception | None,
    ) -> T_co: ...


def _decoding_failed(kind: SerializerKind) -> DecodingFailedError:
    logger.debug("serialization failed kind=%s", kind.value)
    return DecodingFailedError(kind)


@dataclass(slots=True, frozen=True)
class ObjectMapperSerializer(Generic[T]):
    target: type[T]
    key_path: str | None = None
    obj: T | None = None
    context: object | None = None
    separator: str = DEFAULT_KEY_PATH_SEPARATOR

    def serialize(
        self,
        request: httpx.Request | None,
        response: httpx.Response | None,
        data: bytes | None,
        error: Exception | None,
    ) -> T:
        if error is not None:
            raise error
        json_value = process_response(data, self.key_path, separator=self.separator)
        mapper = Mapper(self.target, context=self.context, separator=self.separator)

        if self.obj is not None:
            return mapper.map_onto(json_value, self.obj)
        parsed = mapper.map(json_value)
        if parsed is not None:
            return parsed
        raise _decoding_failed(SerializerKind.OBJECT)


@dataclass(slots=True, frozen=True)
class ObjectMapperArraySerializer(Generic[T]):
    target: type[T]
    key_path: str | None = None
    context: object | None = None
    separator: str = DEFAULT_KEY_PATH_SEPARATOR

    def serialize(
        self,
        request: httpx.Request | None,
        response: httpx.Response | None,
        data: bytes | None,
        error: Exception | None,
    ) -> list[T]:
        if error is not None:
            raise error
        json_value = process_response(data, self.key_path, separator=self.separator)
        mapper = Mapper(self.target, context=self.context, separator=self.separator)

        parsed = mapper.map_array(json_value)
        if parsed is not None:
            return parsed
        raise _decoding_failed(SerializerKind.ARRAY)


@dataclass(slots=True, frozen=True)
class ObjectMapperImmutableSerializer(Generic[T]):
    target: type[T]
    key_path: str | None = None
    context: object | None = None
    separator: str = DEFAULT_KEY_PATH_SEPARATOR

    def serialize(
        self,
        request: httpx.Request | None,
        response: httpx.Response | None,
        data: bytes | None,
        error: Exception | None,
    ) -> T:
        if error is not None:
            raise error
        json_value = process_response(data, self.key_path, separator=self.separator)
        mapper: ImmutableMapper[T] = ImmutableMapper(
            self.target,
            context=self.context,
            separator=self.separator,
        )
        try:
            return mapper.map(json_value)
        except MappingError as exc:
            raise _decoding_failed(SerializerKind.IMMUTABLE_OBJECT) from exc


@dataclass(slots=True, frozen=True)
class ObjectMapperImmutableArraySerializer(Generic[T]):
    target: type[T]
    key_path: str | None = None
    context: object | None = None
    separator: str = DEFAULT_KEY_PATH_SEPARATOR

    def serialize(
        self,
        request: httpx.Request | None,
        response: httpx.Response | None,
        data: bytes | None,
        error: Exception | None,
    ) -> list[T]:
        if error is not None:
            raise error
        json_value = process_response(data, self.key_path, separator=self.separator)
        mapper: ImmutableMapper[T] = ImmutableMapper(
            self.target,
            context=self.context,
            separator=self.separator,
        )
        try:
            return mapper.map_array(json_value)
        except MappingError as exc:
            raise _decoding_failed(SerializerKind.IMMUTABLE_ARRAY) from exc


def build_object_serializer(
    target: type[Any],
    *,
    key_path: str | None,
    obj: object | None,
    context: object | None,
    separator: str,
) -> ResponseSerializer[Any]:
    """Pick the object serializer matching the target's mapping contract."""

    if is_immutable_target(target):
        if obj is not None:
            raise TypeError("map_to_object is not supported for immutable targets")
        return ObjectMapperImmutableSerializer(
            target,
            key_path=key_path,
            context=context,
            separator=separator,
        )
    return ObjectMapperSerializer(
        target,
        key_path=key_path,
        obj=obj,
        context=context,
        separator=separator,
    )


def build_array_serializer(
    target: type[Any],
    *,
    key_path: str | None,
    context: object | None,
    separator: str,
) -> ResponseSerializer[Any]:
    if is_immutable_target(target):
        return ObjectMapperImmutableArraySerializer(
            target,
            key_path=key_path,
            context=context,
            separator=separator,
        )
    return ObjectMapperArraySerializer(
        target,
        key_path=key_path,
        context=context,
        separator=separator,
    )


__all__ = [
    "ResponseSerializer",
    "ObjectMapperSerializer",
    "ObjectMapperArraySerializer",
    "ObjectMapperImmutableSerializer",
    "ObjectMapperImmutableArraySerializer",
    "build_object_serializer",
    "build_array_serializer",
]
