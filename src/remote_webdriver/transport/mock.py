"""Scripted transport for testing and offline use."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Optional, Union

from .base import Transport, TransportError


@dataclass
class RecordedRequest:
    url: str
    method: str
    body: Optional[bytes]


class ScriptedTransport(Transport):
    """Return responses from a predefined sequence and record every request.

    Items may be raw bytes, text (encoded as UTF-8) or an exception, which is
    raised instead of returning a body.
    """

    def __init__(self, responses: Iterable[Union[bytes, str, BaseException]] = ()) -> None:
        self._responses: Deque[Union[bytes, str, BaseException]] = deque(responses)
        self.requests: list[RecordedRequest] = []

    def queue(self, response: Union[bytes, str, BaseException]) -> None:
        self._responses.append(response)

    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        self.requests.append(RecordedRequest(url=url, method=method, body=body))
        if not self._responses:
            raise TransportError("ScriptedTransport ran out of responses")
        item = self._responses.popleft()
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, str):
            return item.encode("utf-8")
        return item
