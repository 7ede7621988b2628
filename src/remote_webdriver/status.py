"""Translation of numeric wire statuses into symbolic state names."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Misspelling kept as-is: existing callers compare against this token.
UNKNOWN_STATE_FALLBACK = "UNKNOWNE STATE"

STATUS_STATES: Mapping[int, str] = MappingProxyType(
    {
        -1: UNKNOWN_STATE_FALLBACK,
        0: "SUCCESS",
        6: "NO_SUCH_SESSION",
        7: "NO_SUCH_ELEMENT",
        8: "NO_SUCH_FRAME",
        9: "UNKNOWN_COMMAND",
        10: "STALE_ELEMENT_REFERENCE",
        11: "ELEMENT_NOT_VISIBLE",
        12: "INVALID_ELEMENT_STATE",
        13: "UNHANDLED_ERROR",
        15: "ELEMENT_NOT_SELECTABLE",
        17: "JAVASCRIPT_ERROR",
        19: "XPATH_LOOKUP_ERROR",
        21: "TIMEOUT",
        23: "NO_SUCH_WINDOW",
        24: "INVALID_COOKIE_DOMAIN",
        25: "UNABLE_TO_SET_COOKIE",
        26: "UNEXPECTED_ALERT_PRESENT",
        27: "NO_ALERT_PRESENT",
        28: "ASYNC_SCRIPT_TIMEOUT",
        29: "INVALID_ELEMENT_COORDINATES",
        30: "IME_NOT_AVAILABLE",
        31: "IME_ENGINE_ACTIVATION_FAILED",
        32: "INVALID_SELECTOR_ERROR",
        33: "SESSION_NOT_CREATED",
        34: "MOVE_TARGET_OUT_OF_BOUNDS",
        51: "INVALID_XPATH_SELECTOR",
        52: "INVALID_XPATH_SELECTOR_RETURN_TYPER",
        60: "ELEMENT_NOT_INTERACTABLE",
        61: "INVALID_ARGUMENT",
        62: "NO_SUCH_COOKIE",
        63: "UNABLE_TO_CAPTURE_SCREEN",
        64: "ELEMENT_CLICK_INTERCEPTED",
    }
)


def resolve_state(status: int) -> str:
    """Return the symbolic state for *status*.

    Codes missing from the table resolve to :data:`UNKNOWN_STATE_FALLBACK`
    so callers always have a non-empty state to branch on.
    """

    return STATUS_STATES.get(status, UNKNOWN_STATE_FALLBACK)


def known_statuses() -> list[tuple[int, str]]:
    """Return the status table ordered by code."""

    return sorted(STATUS_STATES.items())
