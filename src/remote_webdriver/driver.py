"""Driver commands built on top of the dispatch layer."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .dispatch import CommandDispatcher, ElementRequest, Request, decode, encode_body, require_session
from .models import (
    ExecuteScriptResponse,
    FindElementResponse,
    FindElementsResponse,
    Selector,
    StateResponse,
    Timeout,
    ValueResponse,
)
from .transport.base import Transport

LOGGER = logging.getLogger(__name__)


class RemoteWebDriver:
    """Issue wire protocol commands against one remote session.

    The session identifier is plain mutable state with no locking. Share an
    instance between threads only if ``session_id`` is not changed
    concurrently.
    """

    def __init__(self, service_url: str, transport: Transport, *, session_id: str = "") -> None:
        self._service_url = service_url.rstrip("/")
        self._dispatcher = CommandDispatcher(transport)
        self.session_id = session_id

    @property
    def driver_url(self) -> str:
        return self._service_url

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def _session_url(self, calling_command: str, path: str = "") -> str:
        require_session(self.session_id, calling_command)
        return f"{self._service_url}/session/{self.session_id}{path}"

    # Alerts -----------------------------------------------------------------

    def accept_alert(self) -> ValueResponse:
        url = self._session_url("accept_alert", "/alert/accept")
        return self._dispatcher.value_request(
            Request(url=url, method="POST", calling_command="accept_alert")
        )

    def dismiss_alert(self) -> ValueResponse:
        url = self._session_url("dismiss_alert", "/alert/dismiss")
        return self._dispatcher.value_request(
            Request(url=url, method="POST", calling_command="dismiss_alert")
        )

    def alert_text(self) -> ValueResponse:
        url = self._session_url("alert_text", "/alert/text")
        return self._dispatcher.value_request(
            Request(url=url, method="GET", calling_command="alert_text")
        )

    def send_alert_text(self, text: str) -> ValueResponse:
        url = self._session_url("send_alert_text", "/alert/text")
        body = encode_body({"text": text}, "send_alert_text")
        return self._dispatcher.value_request(
            Request(url=url, method="POST", calling_command="send_alert_text", body=body)
        )

    # Scripts ----------------------------------------------------------------

    def execute_script(
        self, script: str, args: Optional[Sequence[str]] = None
    ) -> ExecuteScriptResponse:
        url = self._session_url("execute_script", "/execute/sync")
        return self._dispatcher.script_request(script, url, "execute_script", args)

    def execute_script_async(
        self, script: str, args: Optional[Sequence[str]] = None
    ) -> ExecuteScriptResponse:
        url = self._session_url("execute_script_async", "/execute/async")
        return self._dispatcher.script_request(script, url, "execute_script_async", args)

    # Elements ---------------------------------------------------------------

    def find_element(self, selector: Selector) -> FindElementResponse:
        url = self._session_url("find_element", "/element")
        raw = self._dispatcher.element_request(
            ElementRequest(url=url, selector=selector, method="POST", calling_command="find_element")
        )
        return decode(FindElementResponse, raw, "find_element")

    def find_elements(self, selector: Selector) -> FindElementsResponse:
        url = self._session_url("find_elements", "/elements")
        raw = self._dispatcher.element_request(
            ElementRequest(
                url=url, selector=selector, method="POST", calling_command="find_elements"
            )
        )
        return decode(FindElementsResponse, raw, "find_elements")

    # Session ----------------------------------------------------------------

    def set_session_timeout(self, timeout: Timeout) -> StateResponse:
        url = self._session_url("set_session_timeout", "/timeouts")
        body = encode_body(
            {"type": timeout.kind.value, "ms": timeout.duration}, "set_session_timeout"
        )
        return self._dispatcher.state_request(
            Request(url=url, method="POST", calling_command="set_session_timeout", body=body)
        )

    def delete_session(self) -> StateResponse:
        url = self._session_url("delete_session")
        response = self._dispatcher.state_request(
            Request(url=url, method="DELETE", calling_command="delete_session")
        )
        LOGGER.info("Deleted session %s (%s)", self.session_id, response.state)
        self.session_id = ""
        return response
