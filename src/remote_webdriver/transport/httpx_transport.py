"""Transport backed by an ``httpx`` client."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import TransportConfig
from .base import Transport, TransportError

LOGGER = logging.getLogger(__name__)


class HTTPXTransport(Transport):
    """Perform wire protocol requests with a synchronous ``httpx.Client``."""

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config or TransportConfig()
        headers = {"Accept": "application/json", **self._config.headers}
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._config.timeout, headers=headers)

    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        headers = {"Content-Type": "application/json; charset=utf-8"} if body is not None else None
        LOGGER.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, content=body, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                response=response.content,
            ) from exc
        return response.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPXTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
