"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.extraction import DEFAULT_KEY_PATH_SEPARATOR


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class MappingConfig:
    """Response mapping settings."""

    key_path_separator: str = DEFAULT_KEY_PATH_SEPARATOR
    validate_status: bool = False

    def validate(self) -> None:
        if not isinstance(self.key_path_separator, str) or self.key_path_separator == "":
            raise ValueError("mapping.key_path_separator must be a non-empty string")
        if not isinstance(self.validate_status, bool):
            raise ValueError("mapping.validate_status must be bool")


@dataclass(slots=True, frozen=True)
class ObjectMapperClientConfig:
    """Runtime configuration for object mapper clients."""

    base_url: str = ""
    user_agent: str = "httpx-object-mapper/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    mapping: MappingConfig = field(default_factory=MappingConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()
        self.mapping.validate()


__all__ = [
    "TransportConfig",
    "MappingConfig",
    "ObjectMapperClientConfig",
]
