"""Classified failures raised by the command dispatch layer."""

from __future__ import annotations

import enum
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds a command can produce."""

    SESSION_ID = "session_id"
    COMMUNICATION = "communication"
    MARSHALLING = "marshalling"
    UNMARSHALLING = "unmarshalling"


class WebDriverError(Exception):
    """Base class for every failure surfaced by a driver command."""

    kind: ErrorKind

    def __init__(self, message: str, *, calling_command: str) -> None:
        super().__init__(message)
        self.message = message
        self.calling_command = calling_command

    def __str__(self) -> str:
        return f"{self.calling_command}: {self.message}"


class SessionIDError(WebDriverError):
    """Raised before any network access when no session is active."""

    kind = ErrorKind.SESSION_ID

    def __init__(self, calling_command: str) -> None:
        super().__init__(
            "A session ID is required to perform this command; start a session first",
            calling_command=calling_command,
        )


class CommunicationError(WebDriverError):
    """Raised when the transport fails to complete a round trip."""

    kind = ErrorKind.COMMUNICATION

    def __init__(
        self,
        fault: BaseException,
        *,
        calling_command: str,
        url: str,
        response: bytes = b"",
    ) -> None:
        super().__init__(
            f"Failed to communicate with {url}: {fault}",
            calling_command=calling_command,
        )
        self.fault = fault
        self.url = url
        self.response = response


class MarshallingError(WebDriverError):
    """Raised when a request body cannot be serialized."""

    kind = ErrorKind.MARSHALLING

    def __init__(self, fault: BaseException, *, calling_command: str, payload: Any) -> None:
        super().__init__(
            f"Failed to serialize request body: {fault}",
            calling_command=calling_command,
        )
        self.fault = fault
        self.payload = payload


class UnmarshallingError(WebDriverError):
    """Raised when a reply does not decode into the expected shape."""

    kind = ErrorKind.UNMARSHALLING

    def __init__(
        self,
        fault: BaseException,
        *,
        calling_command: str,
        response: str,
    ) -> None:
        super().__init__(
            f"Failed to decode response: {fault}",
            calling_command=calling_command,
        )
        self.fault = fault
        self.response = response


def error_kind(exc: BaseException) -> Optional[ErrorKind]:
    """Return the :class:`ErrorKind` of *exc*, or ``None`` for foreign errors."""

    if isinstance(exc, WebDriverError):
        return exc.kind
    return None


def is_session_id_error(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.SESSION_ID


def is_communication_error(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.COMMUNICATION


def is_marshalling_error(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.MARSHALLING


def is_unmarshalling_error(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.UNMARSHALLING
