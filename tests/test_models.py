import pytest
from pydantic import ValidationError

from remote_webdriver.models import (
    LEGACY_ELEMENT_KEY,
    W3C_ELEMENT_KEY,
    FindElementResponse,
    FindElementsResponse,
    SelectorKind,
    StateResponse,
    TimeoutKind,
    ValueResponse,
    by_css_selector,
    by_id,
    by_index,
    by_link_text,
    by_partial_link_text,
    by_xpath,
    session_implicit_wait_timeout,
    session_page_load_timeout,
    session_script_timeout,
)


@pytest.mark.parametrize(
    ("selector", "kind", "value"),
    [
        (by_id("main"), "id", "main"),
        (by_css_selector("ul#id > a"), "css selector", "ul#id > a"),
        (by_link_text("Home"), "link text", "Home"),
        (by_partial_link_text("Ho"), "partial link text", "Ho"),
        (by_xpath("//div[@id='x']"), "xpath", "//div[@id='x']"),
        (by_index(3), "index", 3),
    ],
)
def test_selector_builders(selector, kind: str, value) -> None:
    assert selector.kind == SelectorKind(kind)
    assert selector.kind.value == kind
    assert selector.value == value


def test_index_selector_keeps_integer_value() -> None:
    assert isinstance(by_index(0).value, int)


def test_selector_is_immutable() -> None:
    selector = by_id("main")
    with pytest.raises(ValidationError):
        selector.value = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("timeout", "kind"),
    [
        (session_script_timeout(100), TimeoutKind.SCRIPT),
        (session_page_load_timeout(200), TimeoutKind.PAGE_LOAD),
        (session_implicit_wait_timeout(300), TimeoutKind.IMPLICIT),
    ],
)
def test_timeout_builders(timeout, kind: TimeoutKind) -> None:
    assert timeout.kind is kind
    assert timeout.duration in {100, 200, 300}
    with pytest.raises(ValidationError):
        timeout.duration = 1  # type: ignore[misc]


def test_value_response_decodes_payload_exactly() -> None:
    response = ValueResponse.model_validate_json('{"state":"success","value":"8"}')
    assert response.state == "success"
    assert response.value == "8"


def test_value_response_treats_null_value_as_empty() -> None:
    response = ValueResponse.model_validate_json('{"state":"success","value":null}')
    assert response.value == ""


def test_state_response_ignores_payload_state() -> None:
    response = StateResponse.model_validate_json('{"state":"whatever","status":27}')
    assert response.status == 27
    assert response.state == ""


def test_state_response_defaults_missing_status() -> None:
    assert StateResponse.model_validate_json("{}").status == -1


def test_find_element_response_accepts_both_reference_keys() -> None:
    legacy = FindElementResponse.model_validate_json(
        f'{{"state":"success","value":{{"{LEGACY_ELEMENT_KEY}":"0"}}}}'
    )
    w3c = FindElementResponse.model_validate_json(
        f'{{"state":"success","value":{{"{W3C_ELEMENT_KEY}":"abc"}}}}'
    )
    assert legacy.element.id == "0"
    assert w3c.element.id == "abc"


def test_find_element_response_rejects_missing_reference() -> None:
    with pytest.raises(ValidationError):
        FindElementResponse.model_validate_json('{"state":"success","value":{"foo":"bar"}}')


def test_find_elements_response() -> None:
    response = FindElementsResponse.model_validate_json(
        '{"state":"success","value":[{"ELEMENT":"1"},{"ELEMENT":"2"}]}'
    )
    assert [element.id for element in response.elements] == ["1", "2"]
