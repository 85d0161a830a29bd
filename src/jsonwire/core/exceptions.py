"""Exceptions raised by the JSON Wire client."""

from typing import Optional


class JsonWireError(Exception):
    """Base exception for all JSON Wire client errors."""

    pass


# Transport level


class TransportError(JsonWireError):
    """Raised when the HTTP exchange itself fails."""

    pass


class TooManyRedirectsError(TransportError):
    """Raised when a reply redirects more times than allowed."""

    def __init__(self, max_redirects: int, url: str):
        self.max_redirects = max_redirects
        self.url = url
        super().__init__(f"Stopped after {max_redirects} redirects: {url}")


class BadServerReplyError(TransportError):
    """Raised for an HTTP error whose body is not a status envelope."""

    def __init__(self, http_status: int, reason: str = ""):
        self.http_status = http_status
        self.reason = reason
        super().__init__(f"Bad server reply status: {http_status} {reason}".rstrip())


# Codec level


class DecodeError(JsonWireError):
    """Raised when a reply body does not match the expected shape."""

    pass


class EncodeError(JsonWireError):
    """Raised when command parameters cannot be encoded as JSON."""

    pass


# Protocol level


class ProtocolError(JsonWireError):
    """
    Raised when the server reports a failed command.

    Carries the numeric wire status and the classified kind. Subclasses
    exist for every status code the protocol documents.
    """

    status: int = 0
    kind: str = "unknown error"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        if status is not None:
            self.status = status
        self.server_message = message
        text = self.kind if not message else f"{self.kind}: {message}"
        super().__init__(text)


class NoSuchElementError(ProtocolError):
    status = 7
    kind = "no such element"


class NoSuchFrameError(ProtocolError):
    status = 8
    kind = "no such frame"


class UnknownCommandError(ProtocolError):
    status = 9
    kind = "unknown command"


class StaleElementReferenceError(ProtocolError):
    status = 10
    kind = "stale element reference"


class ElementNotVisibleError(ProtocolError):
    status = 11
    kind = "element not visible"


class InvalidElementStateError(ProtocolError):
    status = 12
    kind = "invalid element state"


class UnknownError(ProtocolError):
    """The server reported status 13, its own catch-all failure."""

    status = 13
    kind = "unknown error"


class ElementNotSelectableError(ProtocolError):
    status = 15
    kind = "element is not selectable"


class JavascriptError(ProtocolError):
    status = 17
    kind = "javascript error"


class XPathLookupError(ProtocolError):
    status = 19
    kind = "xpath lookup error"


class CommandTimeoutError(ProtocolError):
    status = 21
    kind = "timeout"


class NoSuchWindowError(ProtocolError):
    status = 23
    kind = "no such window"


class InvalidCookieDomainError(ProtocolError):
    status = 24
    kind = "invalid cookie domain"


class UnableToSetCookieError(ProtocolError):
    status = 25
    kind = "unable to set cookie"


class UnexpectedAlertOpenError(ProtocolError):
    status = 26
    kind = "unexpected alert open"


class NoAlertOpenError(ProtocolError):
    status = 27
    kind = "no alert open"


class ScriptTimeoutError(ProtocolError):
    status = 28
    kind = "script timeout"


class InvalidElementCoordinatesError(ProtocolError):
    status = 29
    kind = "invalid element coordinates"


class InvalidSelectorError(ProtocolError):
    status = 32
    kind = "invalid selector"


class UnknownServerError(ProtocolError):
    """Raised for a non-zero status code outside the documented table."""

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        self.kind = f"unknown error - {code}"
        super().__init__(message, status=code)
