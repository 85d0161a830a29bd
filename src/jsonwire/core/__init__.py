"""Core protocol logic: codec, transport, session routing and element handles."""

from .exceptions import (
    JsonWireError,
    TransportError,
    TooManyRedirectsError,
    BadServerReplyError,
    DecodeError,
    EncodeError,
    ProtocolError,
    NoSuchElementError,
    StaleElementReferenceError,
    UnknownServerError,
)
from .codec import Cookie, Envelope, Point, ServerStatus, SessionInfo, Size
from .element import Element
from .session import RemoteSession, new_remote
from .transport import Transport

__all__ = [
    "JsonWireError",
    "TransportError",
    "TooManyRedirectsError",
    "BadServerReplyError",
    "DecodeError",
    "EncodeError",
    "ProtocolError",
    "NoSuchElementError",
    "StaleElementReferenceError",
    "UnknownServerError",
    "Cookie",
    "Envelope",
    "Point",
    "ServerStatus",
    "SessionInfo",
    "Size",
    "Element",
    "RemoteSession",
    "new_remote",
    "Transport",
]
