"""Mapping layer that turns JSON values into typed objects."""

from .map import Map
from .mapper import ImmutableMapper, Mapper, is_immutable_target
from .protocols import ImmutableMappable, Mappable

__all__ = [
    "Map",
    "Mapper",
    "ImmutableMapper",
    "Mappable",
    "ImmutableMappable",
    "is_immutable_target",
]
