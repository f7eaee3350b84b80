"""Public package exports for httpx object mapper."""

from .async_client import AsyncObjectMapperClient
from .client import ObjectMapperClient
from .config import ObjectMapperClientConfig
from .core.errors import DecodingFailedError, MappingError, ObjectMapperError
from .mapping import ImmutableMappable, ImmutableMapper, Map, Mappable, Mapper
from .response import DataResponse, RawResponse
from .serializers import (
    ObjectMapperArraySerializer,
    ObjectMapperImmutableArraySerializer,
    ObjectMapperImmutableSerializer,
    ObjectMapperSerializer,
)

__all__ = [
    "ObjectMapperClient",
    "AsyncObjectMapperClient",
    "ObjectMapperClientConfig",
    "ObjectMapperError",
    "DecodingFailedError",
    "MappingError",
    "Map",
    "Mapper",
    "ImmutableMapper",
    "Mappable",
    "ImmutableMappable",
    "DataResponse",
    "RawResponse",
    "ObjectMapperSerializer",
    "ObjectMapperArraySerializer",
    "ObjectMapperImmutableSerializer",
    "ObjectMapperImmutableArraySerializer",
]
