"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from .config import ObjectMapperClientConfig
from .core.errors import ObjectMapperError


def validate_client_config(config: ObjectMapperClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ObjectMapperError(str(exc)) from exc


def build_default_headers(config: ObjectMapperClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ObjectMapperClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_client_kwargs(config: ObjectMapperClientConfig) -> dict[str, object]:
    kwargs: dict[str, object] = {
        "headers": build_default_headers(config),
        "timeout": build_default_timeout(config),
    }
    if config.base_url:
        kwargs["base_url"] = config.base_url.rstrip("/") + "/"
    return kwargs


__all__ = [
    "validate_client_config",
    "build_default_headers",
    "build_default_timeout",
    "build_client_kwargs",
]
