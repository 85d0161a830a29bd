"""Map wire status codes to typed client errors."""

from enum import Enum
from typing import Optional

from ..core.exceptions import (
    ProtocolError,
    NoSuchElementError,
    NoSuchFrameError,
    UnknownCommandError,
    StaleElementReferenceError,
    ElementNotVisibleError,
    InvalidElementStateError,
    UnknownError,
    ElementNotSelectableError,
    JavascriptError,
    XPathLookupError,
    CommandTimeoutError,
    NoSuchWindowError,
    InvalidCookieDomainError,
    UnableToSetCookieError,
    UnexpectedAlertOpenError,
    NoAlertOpenError,
    ScriptTimeoutError,
    InvalidElementCoordinatesError,
    InvalidSelectorError,
    UnknownServerError,
)

SUCCESS = 0


class ErrorKind(str, Enum):
    """Error kinds reported by a JSON Wire server."""

    # Element errors
    NO_SUCH_ELEMENT = "no such element"
    STALE_ELEMENT_REFERENCE = "stale element reference"
    ELEMENT_NOT_VISIBLE = "element not visible"
    INVALID_ELEMENT_STATE = "invalid element state"
    ELEMENT_NOT_SELECTABLE = "element is not selectable"
    INVALID_ELEMENT_COORDINATES = "invalid element coordinates"

    # Selector errors
    XPATH_LOOKUP_ERROR = "xpath lookup error"
    INVALID_SELECTOR = "invalid selector"

    # Window/Frame errors
    NO_SUCH_FRAME = "no such frame"
    NO_SUCH_WINDOW = "no such window"

    # Alert errors
    UNEXPECTED_ALERT_OPEN = "unexpected alert open"
    NO_ALERT_OPEN = "no alert open"

    # Cookie errors
    INVALID_COOKIE_DOMAIN = "invalid cookie domain"
    UNABLE_TO_SET_COOKIE = "unable to set cookie"

    # Script errors
    JAVASCRIPT_ERROR = "javascript error"
    SCRIPT_TIMEOUT = "script timeout"

    # Generic errors
    TIMEOUT = "timeout"
    UNKNOWN_COMMAND = "unknown command"
    UNKNOWN_ERROR = "unknown error"


# Documented status codes
STATUS_CODE_MAP: dict[int, ErrorKind] = {
    7: ErrorKind.NO_SUCH_ELEMENT,
    8: ErrorKind.NO_SUCH_FRAME,
    9: ErrorKind.UNKNOWN_COMMAND,
    10: ErrorKind.STALE_ELEMENT_REFERENCE,
    11: ErrorKind.ELEMENT_NOT_VISIBLE,
    12: ErrorKind.INVALID_ELEMENT_STATE,
    13: ErrorKind.UNKNOWN_ERROR,
    15: ErrorKind.ELEMENT_NOT_SELECTABLE,
    17: ErrorKind.JAVASCRIPT_ERROR,
    19: ErrorKind.XPATH_LOOKUP_ERROR,
    21: ErrorKind.TIMEOUT,
    23: ErrorKind.NO_SUCH_WINDOW,
    24: ErrorKind.INVALID_COOKIE_DOMAIN,
    25: ErrorKind.UNABLE_TO_SET_COOKIE,
    26: ErrorKind.UNEXPECTED_ALERT_OPEN,
    27: ErrorKind.NO_ALERT_OPEN,
    28: ErrorKind.SCRIPT_TIMEOUT,
    29: ErrorKind.INVALID_ELEMENT_COORDINATES,
    32: ErrorKind.INVALID_SELECTOR,
}

EXCEPTION_MAP: dict[ErrorKind, type[ProtocolError]] = {
    ErrorKind.NO_SUCH_ELEMENT: NoSuchElementError,
    ErrorKind.NO_SUCH_FRAME: NoSuchFrameError,
    ErrorKind.UNKNOWN_COMMAND: UnknownCommandError,
    ErrorKind.STALE_ELEMENT_REFERENCE: StaleElementReferenceError,
    ErrorKind.ELEMENT_NOT_VISIBLE: ElementNotVisibleError,
    ErrorKind.INVALID_ELEMENT_STATE: InvalidElementStateError,
    ErrorKind.UNKNOWN_ERROR: UnknownError,
    ErrorKind.ELEMENT_NOT_SELECTABLE: ElementNotSelectableError,
    ErrorKind.JAVASCRIPT_ERROR: JavascriptError,
    ErrorKind.XPATH_LOOKUP_ERROR: XPathLookupError,
    ErrorKind.TIMEOUT: CommandTimeoutError,
    ErrorKind.NO_SUCH_WINDOW: NoSuchWindowError,
    ErrorKind.INVALID_COOKIE_DOMAIN: InvalidCookieDomainError,
    ErrorKind.UNABLE_TO_SET_COOKIE: UnableToSetCookieError,
    ErrorKind.UNEXPECTED_ALERT_OPEN: UnexpectedAlertOpenError,
    ErrorKind.NO_ALERT_OPEN: NoAlertOpenError,
    ErrorKind.SCRIPT_TIMEOUT: ScriptTimeoutError,
    ErrorKind.INVALID_ELEMENT_COORDINATES: InvalidElementCoordinatesError,
    ErrorKind.INVALID_SELECTOR: InvalidSelectorError,
}

# W3C-style error names that differ from the JSON Wire wording
ERROR_NAME_ALIASES: dict[str, ErrorKind] = {
    "no such alert": ErrorKind.NO_ALERT_OPEN,
    "element not interactable": ErrorKind.ELEMENT_NOT_VISIBLE,
}


def classify(status: int) -> Optional[ErrorKind]:
    """
    Classify a non-zero wire status code.

    Args:
        status: Status field of a reply envelope

    Returns:
        The documented ErrorKind, or None when the code is not in the table
    """
    return STATUS_CODE_MAP.get(status)


def error_for_status(status: int, message: Optional[str] = None) -> ProtocolError:
    """
    Build the exception for a failed reply.

    Args:
        status: Non-zero status code from the envelope
        message: Optional server-supplied detail

    Returns:
        Typed ProtocolError; UnknownServerError for unlisted codes
    """
    kind = classify(status)
    if kind is None:
        return UnknownServerError(status, message)
    return EXCEPTION_MAP[kind](message)


def error_for_name(name: str, message: Optional[str] = None) -> ProtocolError:
    """Build the exception for a reply that names its error instead of numbering it."""
    name = name.lower()
    kind = ERROR_NAME_ALIASES.get(name)
    if kind is None:
        try:
            kind = ErrorKind(name)
        except ValueError:
            detail = f"{name}: {message}" if message else name
            return UnknownError(detail)
    return EXCEPTION_MAP[kind](message)
