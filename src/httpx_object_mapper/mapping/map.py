"""Field access helper handed to mapping hooks."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ..core.errors import MappingError
from ..core.extraction import DEFAULT_KEY_PATH_SEPARATOR, resolve_key_path


class Map:
    """Read-only view over one JSON object plus the caller's mapping context."""

    def __init__(
        self,
        json: Mapping[str, object],
        *,
        context: object | None = None,
        separator: str = DEFAULT_KEY_PATH_SEPARATOR,
    ) -> None:
        self._json = json
        self._context = context
        self._separator = separator

    @property
    def json(self) -> Mapping[str, object]:
        return self._json

    @property
    def context(self) -> object | None:
        return self._context

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._lookup(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        value = self._lookup(key)
        return default if value is None else value

    def value(self, key: str, convert: Callable[[Any], Any] | None = None) -> Any:
        """Strict read: missing or null values raise ``MappingError``."""

        raw = self._lookup(key)
        if raw is None:
            raise MappingError(f"missing value for key '{key}'", key=key)
        if convert is None:
            return raw
        try:
            return convert(raw)
        except MappingError as exc:
            raise MappingError(f"invalid value for key '{key}': {exc}", key=key) from exc
        except (TypeError, ValueError) as exc:
            raise MappingError(f"invalid value for key '{key}': {exc}", key=key) from exc

    def object(self, key: str, target: type, *, required: bool = True) -> Any:
        from .mapper import ImmutableMapper, Mapper, is_immutable_target

        raw = self._lookup(key)
        if raw is None:
            if required:
                raise MappingError(f"missing value for key '{key}'", key=key)
            return None
        if is_immutable_target(target):
            immutable = ImmutableMapper(target, context=self._context, separator=self._separator)
            return self.value(key, immutable.map)
        mapper = Mapper(target, context=self._context, separator=self._separator)
        mapped = mapper.map(raw)
        if mapped is None:
            raise MappingError(f"invalid object for key '{key}'", key=key)
        return mapped

    def objects(self, key: str, target: type, *, required: bool = True) -> list[Any] | None:
        from .mapper import ImmutableMapper, Mapper, is_immutable_target

        raw = self._lookup(key)
        if raw is None:
            if required:
                raise MappingError(f"missing value for key '{key}'", key=key)
            return None
        if is_immutable_target(target):
            immutable = ImmutableMapper(target, context=self._context, separator=self._separator)
            return self.value(key, immutable.map_array)
        mapper = Mapper(target, context=self._context, separator=self._separator)
        mapped = mapper.map_array(raw)
        if mapped is None:
            raise MappingError(f"invalid array for key '{key}'", key=key)
        return mapped

    def _lookup(self, key: str) -> object | None:
        if key in self._json:
            return self._json[key]
        if self._separator not in key:
            return None
        return resolve_key_path(self._json, key, separator=self._separator)


__all__ = [
    "Map",
]
