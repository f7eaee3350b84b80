"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from .client_shared import build_client_kwargs, validate_client_config
from .config import ObjectMapperClientConfig
from .core.errors import ClientClosedError
from .request import DataRequest


class ObjectMapperClient:
    """HTTP client whose requests map JSON responses onto typed objects."""

    def __init__(
        self,
        *,
        config: ObjectMapperClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or ObjectMapperClientConfig()
        validate_client_config(self._config)

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(**build_client_kwargs(self._config))
        self._closed = False

    @property
    def config(self) -> ObjectMapperClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("ObjectMapperClient is already closed")

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json: object | None = None,
        content: bytes | str | None = None,
    ) -> DataRequest:
        self._ensure_open()
        request = self._client.build_request(
            method,
            url,
            params=params,
            headers=headers,
            json=json,
            content=content,
        )
        data_request = DataRequest(
            self,
            self._client,
            request,
            separator=self._config.mapping.key_path_separator,
        )
        if self._config.mapping.validate_status:
            data_request.validate()
        return data_request

    def get(self, url: str, **kwargs: Any) -> DataRequest:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> DataRequest:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> DataRequest:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> DataRequest:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> DataRequest:
        return self.request("DELETE", url, **kwargs)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ObjectMapperClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "ObjectMapperClient",
]
