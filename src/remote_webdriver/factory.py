"""Factories for constructing components from configuration."""

from __future__ import annotations

from typing import Optional

from .config import DriverConfig, TransportConfig
from .driver import RemoteWebDriver
from .transport.base import Transport
from .transport.httpx_transport import HTTPXTransport


def build_transport(config: TransportConfig) -> HTTPXTransport:
    return HTTPXTransport(config)


def build_driver(config: DriverConfig, transport: Optional[Transport] = None) -> RemoteWebDriver:
    return RemoteWebDriver(
        config.service_url,
        transport or build_transport(config.transport),
        session_id=config.session_id,
    )
