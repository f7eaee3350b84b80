"""Target contracts understood by the mappers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .map import Map


@runtime_checkable
class Mappable(Protocol):
    """Mutable contract.

    Implementations must be constructible without arguments. ``mapping`` sets
    fields from ``map`` and may be called again on an existing instance.
    An optional ``accepts(cls, map) -> bool`` classmethod can refuse a payload
    before an instance is created.
    """

    def mapping(self, map: "Map") -> None: ...


@runtime_checkable
class ImmutableMappable(Protocol):
    """Immutable contract.

    ``from_map`` builds a complete instance or raises ``MappingError``.
    """

    @classmethod
    def from_map(cls, map: "Map") -> Any: ...


__all__ = [
    "Mappable",
    "ImmutableMappable",
]
