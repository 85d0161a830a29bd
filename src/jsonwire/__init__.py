"""Client for the Selenium JSON Wire Protocol."""

from .config import Settings, settings
from .core import (
    Cookie,
    DecodeError,
    Element,
    JsonWireError,
    Point,
    ProtocolError,
    RemoteSession,
    Size,
    Transport,
    TransportError,
    new_remote,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "Cookie",
    "DecodeError",
    "Element",
    "JsonWireError",
    "Point",
    "ProtocolError",
    "RemoteSession",
    "Size",
    "Transport",
    "TransportError",
    "new_remote",
]
