"""Request dispatch and response decoding shared by every driver command.

Each command builds a :class:`Request` (or :class:`ElementRequest`) and hands
it to a :class:`CommandDispatcher`. The dispatcher performs exactly one
round trip through its :class:`~remote_webdriver.transport.base.Transport`
and turns the outcome into a typed response model or one of the classified
errors from :mod:`remote_webdriver.errors`. Nothing is retried.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import CommunicationError, MarshallingError, SessionIDError, UnmarshallingError
from .models import ExecuteScriptResponse, Selector, StateResponse, ValueResponse
from .status import resolve_state
from .transport.base import Transport, TransportError

LOGGER = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Request:
    """A single command round trip with a prebuilt body."""

    url: str
    method: str
    calling_command: str
    body: Optional[bytes] = None


@dataclass(frozen=True)
class ElementRequest:
    """An element lookup; the body is derived from ``selector`` at dispatch."""

    url: str
    selector: Selector
    method: str
    calling_command: str


def require_session(session_id: str, calling_command: str) -> None:
    """Raise :class:`SessionIDError` unless *session_id* is non-empty."""

    if not session_id:
        raise SessionIDError(calling_command)


def encode_body(payload: Any, calling_command: str) -> bytes:
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise MarshallingError(exc, calling_command=calling_command, payload=payload) from exc


def decode(model: type[ResponseT], raw: bytes, calling_command: str) -> ResponseT:
    """Decode *raw* into *model*, failing closed with :class:`UnmarshallingError`."""

    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise UnmarshallingError(
            exc,
            calling_command=calling_command,
            response=raw.decode("utf-8", errors="replace"),
        ) from exc


class CommandDispatcher:
    """Send requests through a transport and decode the replies."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def send(self, url: str, method: str, body: Optional[bytes], calling_command: str) -> bytes:
        """Perform the round trip, wrapping transport faults as communication errors."""

        LOGGER.debug("Dispatching %s: %s %s", calling_command, method, url)
        try:
            return self._transport.perform_request(url, method, body)
        except TransportError as exc:
            LOGGER.debug("Transport fault during %s: %s", calling_command, exc)
            raise CommunicationError(
                exc,
                calling_command=calling_command,
                url=url,
                response=exc.response,
            ) from exc

    def state_request(self, request: Request) -> StateResponse:
        raw = self.send(request.url, request.method, request.body, request.calling_command)
        response = decode(StateResponse, raw, request.calling_command)
        response.state = resolve_state(response.status)
        return response

    def value_request(self, request: Request) -> ValueResponse:
        raw = self.send(request.url, request.method, request.body, request.calling_command)
        return decode(ValueResponse, raw, request.calling_command)

    def element_request(self, request: ElementRequest) -> bytes:
        """Send an element lookup and return the undecoded reply.

        The reply shape depends on the command, so decoding is left to the
        caller (see :func:`decode`).
        """

        payload = {"using": request.selector.kind.value, "value": request.selector.value}
        body = encode_body(payload, request.calling_command)
        return self.send(request.url, request.method, body, request.calling_command)

    def script_request(
        self,
        script: str,
        url: str,
        calling_command: str,
        args: Optional[Sequence[str]] = None,
    ) -> ExecuteScriptResponse:
        payload = {"script": script, "args": list(args) if args is not None else [""]}
        body = encode_body(payload, calling_command)
        response = self.value_request(
            Request(url=url, method="POST", calling_command=calling_command, body=body)
        )
        return ExecuteScriptResponse(state=response.state, response=response.value)
