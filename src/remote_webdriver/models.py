"""Value types and response shapes shared across the remote webdriver client."""

from __future__ import annotations

import enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
LEGACY_ELEMENT_KEY = "ELEMENT"


class SelectorKind(str, enum.Enum):
    """Location strategies understood by the remote end."""

    ID = "id"
    CSS_SELECTOR = "css selector"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    XPATH = "xpath"
    INDEX = "index"


class Selector(BaseModel):
    """A strategy and value pair describing how to locate an element."""

    model_config = ConfigDict(frozen=True)

    kind: SelectorKind
    value: Union[int, str]


def by_id(element_id: str) -> Selector:
    return Selector(kind=SelectorKind.ID, value=element_id)


def by_css_selector(selector: str) -> Selector:
    """Locate elements with a CSS selector such as ``ul#id > a``."""

    return Selector(kind=SelectorKind.CSS_SELECTOR, value=selector)


def by_link_text(text: str) -> Selector:
    """Locate an anchor element by its full inner text."""

    return Selector(kind=SelectorKind.LINK_TEXT, value=text)


def by_partial_link_text(text: str) -> Selector:
    """Locate an anchor element whose inner text contains *text*."""

    return Selector(kind=SelectorKind.PARTIAL_LINK_TEXT, value=text)


def by_xpath(path: str) -> Selector:
    return Selector(kind=SelectorKind.XPATH, value=path)


def by_index(index: int) -> Selector:
    return Selector(kind=SelectorKind.INDEX, value=index)


class TimeoutKind(str, enum.Enum):
    """Session timeout categories."""

    SCRIPT = "script"
    PAGE_LOAD = "page load"
    IMPLICIT = "implicit"


class Timeout(BaseModel):
    """A session timeout category with its duration in milliseconds."""

    model_config = ConfigDict(frozen=True)

    kind: TimeoutKind
    duration: int


def session_script_timeout(duration: int) -> Timeout:
    return Timeout(kind=TimeoutKind.SCRIPT, duration=duration)


def session_page_load_timeout(duration: int) -> Timeout:
    return Timeout(kind=TimeoutKind.PAGE_LOAD, duration=duration)


def session_implicit_wait_timeout(duration: int) -> Timeout:
    return Timeout(kind=TimeoutKind.IMPLICIT, duration=duration)


class StateResponse(BaseModel):
    """Reply carrying a numeric status; ``state`` is resolved locally."""

    status: int = Field(default=-1, strict=True)
    state: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value: object) -> object:
        return -1 if value is None else value

    @field_validator("state", mode="before")
    @classmethod
    def _ignore_payload_state(cls, value: object) -> str:
        return ""


class ValueResponse(BaseModel):
    """Reply whose symbolic state and value come straight from the payload.

    Missing or ``null`` fields decode as empty strings; W3C remote ends
    answer alert commands with a bare ``{"value": null}``.
    """

    state: str = Field(default="", strict=True)
    value: str = Field(default="", strict=True)

    @field_validator("state", "value", mode="before")
    @classmethod
    def _null_text(cls, value: Optional[str]) -> object:
        return "" if value is None else value


class ExecuteScriptResponse(BaseModel):
    """Result of running a script in the current browsing context."""

    state: str
    response: str


class Element(BaseModel):
    """Reference to an element held by the remote end."""

    id: str

    @classmethod
    def from_reference(cls, reference: dict[str, str]) -> "Element":
        for key in (W3C_ELEMENT_KEY, LEGACY_ELEMENT_KEY):
            if key in reference:
                return cls(id=reference[key])
        raise ValueError(f"No element identifier in reference: {reference}")


class FindElementResponse(BaseModel):
    """Reply to a single element lookup; the element arrives under ``value``."""

    model_config = ConfigDict(populate_by_name=True)

    state: str
    element: Element = Field(alias="value")

    @field_validator("element", mode="before")
    @classmethod
    def _element_reference(cls, value: object) -> object:
        if isinstance(value, dict) and "id" not in value:
            return Element.from_reference(value)
        return value


class FindElementsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: str
    elements: list[Element] = Field(alias="value", default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _element_references(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        return [
            Element.from_reference(item)
            if isinstance(item, dict) and "id" not in item
            else item
            for item in value
        ]
