from __future__ import annotations

from dataclasses import FrozenInstanceError

import httpx
import pytest

from httpx_object_mapper.client import ObjectMapperClient
from httpx_object_mapper.client_shared import build_client_kwargs, build_default_timeout
from httpx_object_mapper.config import MappingConfig, ObjectMapperClientConfig, TransportConfig
from httpx_object_mapper.core.errors import ObjectMapperError


def test_config_defaults():
    cfg = ObjectMapperClientConfig()
    cfg.validate()
    assert cfg.base_url == ""
    assert cfg.mapping.key_path_separator == "."
    assert cfg.mapping.validate_status is False


def test_config_is_immutable():
    cfg = ObjectMapperClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.mapping = MappingConfig(validate_status=True)


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field: str):
    cfg = ObjectMapperClientConfig(transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=field):
        cfg.validate()


@pytest.mark.parametrize(
    "mapping",
    [MappingConfig(key_path_separator=""), MappingConfig(validate_status="yes")],  # type: ignore[arg-type]
    ids=["empty-separator", "non-bool-validate"],
)
def test_config_validate_rejects_invalid_mapping(mapping: MappingConfig):
    with pytest.raises(ValueError):
        ObjectMapperClientConfig(mapping=mapping).validate()


def test_config_validate_rejects_empty_user_agent():
    with pytest.raises(ValueError):
        ObjectMapperClientConfig(user_agent="").validate()


def test_client_wraps_invalid_config_in_package_error():
    with pytest.raises(ObjectMapperError, match="key_path_separator"):
        ObjectMapperClient(config=ObjectMapperClientConfig(mapping=MappingConfig(key_path_separator="")))


def test_build_client_kwargs_normalizes_base_url():
    kwargs = build_client_kwargs(ObjectMapperClientConfig(base_url="https://api.example.test/v1"))
    assert kwargs["base_url"] == "https://api.example.test/v1/"
    assert "base_url" not in build_client_kwargs(ObjectMapperClientConfig())


def test_build_default_timeout_uses_transport_config():
    timeout = build_default_timeout(
        ObjectMapperClientConfig(transport=TransportConfig(timeout_read_seconds=12.0))
    )
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.read == 12.0
    assert timeout.connect == 5.0
