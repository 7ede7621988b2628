"""Transport abstractions used by the command dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class TransportError(RuntimeError):
    """Raised when a round trip to the remote end fails.

    ``response`` holds whatever bytes were received before the failure.
    """

    def __init__(self, message: str, *, response: bytes = b"") -> None:
        super().__init__(message)
        self.response = response


class Transport(ABC):
    """Interface for performing a single request against the remote end."""

    @abstractmethod
    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        """Send the request and return the raw response body."""

    def close(self) -> None:
        """Release any held resources."""
