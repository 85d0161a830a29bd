"""Element handles: server-issued ids bound to the session that issued them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from . import codec
from .codec import Point, Size

if TYPE_CHECKING:
    from .session import RemoteSession


@dataclass(frozen=True)
class Element:
    """
    Opaque reference to a DOM node inside a remote session.

    Nothing is cached: every query is a fresh round trip. A handle goes
    stale when the page navigates or the node is detached; the server then
    answers with a stale element reference error.
    """

    id: str
    session: RemoteSession = field(repr=False)

    def _command(self, command: str, /, params=None, shape=None, **path):
        return self.session.send_command(command, params, shape, element_id=self.id, **path)

    def to_wire(self) -> dict:
        """Reference form used when passing the element as a parameter."""
        return {codec.ELEMENT_KEY: self.id}

    # Interaction

    def click(self) -> None:
        self._command("click_element")

    def send_keys(self, keys: str) -> None:
        """Type keys into the element, one character per sequence entry."""
        self._command("send_keys", {"value": list(keys)})

    def submit(self) -> None:
        self._command("submit")

    def clear(self) -> None:
        self._command("clear")

    def move_to(self, x_offset: int = 0, y_offset: int = 0) -> None:
        """Move the mouse to an offset from the element's top-left corner."""
        self.session.move_to(self, x_offset, y_offset)

    # Discovery

    def find_element(self, by: str, value: str) -> Element:
        return self.session.locate("find_child_element", by, value, element_id=self.id)

    def find_elements(self, by: str, value: str) -> list[Element]:
        return self.session.locate_all("find_child_elements", by, value, element_id=self.id)

    # Properties

    def tag_name(self) -> str:
        return self._command("tag_name", shape=codec.STRING)

    def text(self) -> str:
        return self._command("text", shape=codec.STRING)

    def get_attribute(self, name: str) -> Optional[str]:
        """Attribute value, or None when the element does not carry it."""
        return self._command("get_attribute", shape=codec.OPTIONAL_STRING, name=name)

    def css_property(self, name: str) -> str:
        return self._command("css_property", shape=codec.STRING, name=name)

    def is_selected(self) -> bool:
        return self._command("is_selected", shape=codec.BOOL)

    def is_enabled(self) -> bool:
        return self._command("is_enabled", shape=codec.BOOL)

    def is_displayed(self) -> bool:
        return self._command("is_displayed", shape=codec.BOOL)

    def location(self) -> Point:
        return self._command("location", shape=codec.POINT)

    def location_in_view(self) -> Point:
        """Location after scrolling the element into view."""
        return self._command("location_in_view", shape=codec.POINT)

    def size(self) -> Size:
        return self._command("element_size", shape=codec.SIZE)
