"""
Encoding of command parameters and decoding of reply envelopes.

Every reply from the server is wrapped in the same envelope::

    {"sessionId": "...", "status": 0, "value": <anything>}

The envelope is decoded first; its ``value`` is then validated against the
shape the calling command expects. Shapes are pydantic ``TypeAdapter``
instances, so a single ``decode_value`` covers strings, booleans, element
references, cookies, points, sizes and free-form values alike.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Optional, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    BeforeValidator,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .exceptions import DecodeError, EncodeError

T = TypeVar("T")

ELEMENT_KEY = "ELEMENT"
W3C_ELEMENT_KEY = "element-6066-11e4-a52f-4f735a8d4a6f"


class Envelope(BaseModel):
    """Generic reply wrapper shared by every command."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    status: int = 0
    value: Any = None

    @field_validator("status", mode="before")
    @classmethod
    def _null_status_is_success(cls, v):
        return 0 if v is None else v


class ElementReference(BaseModel):
    """Server-issued element id as it appears in a reply value."""

    id: StrictStr = Field(validation_alias=AliasChoices(ELEMENT_KEY, W3C_ELEMENT_KEY))


class Cookie(BaseModel):
    """A browser cookie; unknown wire keys are carried through untouched."""

    model_config = ConfigDict(extra="allow")

    name: str
    value: str
    path: Optional[str] = None
    domain: Optional[str] = None
    secure: Optional[bool] = None
    expiry: Optional[int] = None  # unix seconds

    def to_wire(self) -> dict:
        return self.model_dump(exclude_none=True)


class Point(BaseModel):
    x: float
    y: float


class Size(BaseModel):
    width: float
    height: float


class BuildInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    version: Optional[str] = None
    revision: Optional[str] = None
    time: Optional[str] = None


class OSInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    arch: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None


class JavaInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    version: Optional[str] = None


class ServerStatus(BaseModel):
    """Value of the /status reply."""

    model_config = ConfigDict(extra="allow")

    build: Optional[BuildInfo] = None
    os: Optional[OSInfo] = None
    java: Optional[JavaInfo] = None


class SessionInfo(BaseModel):
    """One entry of the /sessions reply."""

    id: str
    capabilities: dict[str, Any] = Field(default_factory=dict)


def _nullable_list(item: Any) -> Any:
    """List shape where a null value reads as no items."""
    return Annotated[list[item], BeforeValidator(lambda v: [] if v is None else v)]


# Reply value shapes
STRING = TypeAdapter(StrictStr)
OPTIONAL_STRING = TypeAdapter(Optional[StrictStr])
BOOL = TypeAdapter(StrictBool)
STRINGS = TypeAdapter(_nullable_list(StrictStr))
ELEMENT = TypeAdapter(ElementReference)
ELEMENTS = TypeAdapter(_nullable_list(ElementReference))
COOKIES = TypeAdapter(_nullable_list(Cookie))
POINT = TypeAdapter(Point)
SIZE = TypeAdapter(Size)
CAPABILITIES = TypeAdapter(dict[str, Any])
ANY = TypeAdapter(Any)
SERVER_STATUS = TypeAdapter(ServerStatus)
SESSIONS = TypeAdapter(_nullable_list(SessionInfo))


def _to_wire(obj: Any) -> Any:
    """json.dumps hook for models and element handles."""
    to_wire = getattr(obj, "to_wire", None)
    if callable(to_wire):
        return to_wire()
    if isinstance(obj, BaseModel):
        return obj.model_dump(exclude_none=True)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(params: Any) -> bytes:
    """
    Encode command parameters as a UTF-8 JSON body.

    Args:
        params: JSON-representable parameters, or None for no body

    Returns:
        Encoded body (empty when params is None)

    Raises:
        EncodeError: If params cannot be represented as JSON
    """
    if params is None:
        return b""
    try:
        return json.dumps(params, default=_to_wire).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Cannot encode command parameters: {e}") from e


def decode_envelope(body: bytes) -> Envelope:
    """
    Decode the generic reply envelope.

    An empty body is a valid reply for commands without a return value and
    decodes to a successful envelope with no value.

    Raises:
        DecodeError: If the body is not a JSON object of the envelope shape
    """
    if not body or not body.strip():
        return Envelope()
    try:
        return Envelope.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Malformed reply envelope: {e}") from e


def decode_value(raw: Any, shape: TypeAdapter[T]) -> T:
    """
    Validate an envelope value against the shape a command expects.

    Args:
        raw: The envelope's value field
        shape: One of the module-level shapes (STRING, BOOL, ELEMENT, ...)

    Returns:
        The decoded value

    Raises:
        DecodeError: If the value does not match the shape, including a
            missing/null value where a string or bool is required
    """
    try:
        return shape.validate_python(raw)
    except ValidationError as e:
        raise DecodeError(f"Unexpected reply value {raw!r}: {e}") from e


def decode_reply(body: bytes, shape: TypeAdapter[T]) -> T:
    """Decode a raw reply body straight into the expected value shape."""
    return decode_value(decode_envelope(body).value, shape)
