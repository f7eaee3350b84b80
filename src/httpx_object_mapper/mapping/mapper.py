"""Mappers for the mutable and immutable target contracts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import MappingError
from ..core.extraction import DEFAULT_KEY_PATH_SEPARATOR
from .map import Map

logger = logging.getLogger("httpx_object_mapper")

T = TypeVar("T")


def _is_pydantic_model(target: object) -> bool:
    return isinstance(target, type) and issubclass(target, BaseModel)


def is_immutable_target(target: object) -> bool:
    if _is_pydantic_model(target):
        return True
    return callable(getattr(target, "from_map", None))


class Mapper(Generic[T]):
    """Maps JSON objects onto default-constructible ``Mappable`` types."""

    def __init__(
        self,
        target: type[T],
        *,
        context: object | None = None,
        separator: str = DEFAULT_KEY_PATH_SEPARATOR,
    ) -> None:
        self._target = target
        self._context = context
        self._separator = separator

    def map(self, json: object) -> T | None:
        if not isinstance(json, Mapping):
            return None
        map_ = self._make_map(json)
        accepts = getattr(self._target, "accepts", None)
        if accepts is not None and not accepts(map_):
            logger.debug("mapping refused target=%s", self._target.__name__)
            return None
        obj = self._target()
        try:
            obj.mapping(map_)  # type: ignore[attr-defined]
        except MappingError as exc:
            logger.debug(
                "mapping failed target=%s key=%s",
                self._target.__name__,
                exc.key,
            )
            return None
        return obj

    def map_onto(self, json: object, obj: T) -> T:
        """Update ``obj`` in place; fields absent from ``json`` are left untouched."""

        if not isinstance(json, Mapping):
            return obj
        try:
            obj.mapping(self._make_map(json))  # type: ignore[attr-defined]
        except MappingError as exc:
            logger.debug(
                "partial mapping onto existing object target=%s key=%s",
                type(obj).__name__,
                exc.key,
            )
        return obj

    def map_array(self, json: object) -> list[T] | None:
        if not isinstance(json, list):
            return None
        if any(not isinstance(item, Mapping) for item in json):
            return None
        results: list[T] = []
        for item in json:
            mapped = self.map(item)
            if mapped is not None:
                results.append(mapped)
        return results

    def _make_map(self, json: Mapping[str, object]) -> Map:
        return Map(json, context=self._context, separator=self._separator)


class ImmutableMapper(Generic[T]):
    """Builds ``ImmutableMappable`` types or pydantic models in a single step."""

    def __init__(
        self,
        target: type[T],
        *,
        context: object | None = None,
        separator: str = DEFAULT_KEY_PATH_SEPARATOR,
    ) -> None:
        if not is_immutable_target(target):
            raise TypeError(f"{target!r} does not implement the immutable mapping contract")
        self._target = target
        self._context = context
        self._separator = separator

    def map(self, json: object) -> T:
        if not isinstance(json, Mapping):
            raise MappingError("JSON value must be an object")
        if _is_pydantic_model(self._target):
            return self._validate_model(json)
        target: Any = self._target
        try:
            return target.from_map(Map(json, context=self._context, separator=self._separator))
        except MappingError:
            raise
        except (TypeError, ValueError, KeyError, AttributeError) as exc:
            raise MappingError(f"cannot construct {self._target.__name__}: {exc}") from exc

    def map_array(self, json: object) -> list[T]:
        if not isinstance(json, list):
            raise MappingError("JSON value must be an array")
        results: list[T] = []
        for index, item in enumerate(json):
            try:
                results.append(self.map(item))
            except MappingError as exc:
                raise MappingError(f"element {index}: {exc}", key=exc.key) from exc
        return results

    def _validate_model(self, json: Mapping[str, object]) -> T:
        model: Any = self._target
        try:
            return model.model_validate(dict(json), context=self._context)
        except ValidationError as exc:
            raise MappingError(
                f"cannot construct {self._target.__name__}: "
                f"{exc.error_count()} validation error(s)"
            ) from exc


__all__ = [
    "Mapper",
    "ImmutableMapper",
    "is_immutable_target",
]
