"""Remote session: owns the session id and routes commands to the server."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Optional, Sequence, Union
from urllib.parse import quote

from pydantic import TypeAdapter

from ..config import Settings, settings as default_settings
from ..utils.element_resolver import get_by_strategy
from . import codec
from .codec import Cookie, Point, ServerStatus, SessionInfo, Size
from .commands import COMMANDS
from .element import Element
from .exceptions import DecodeError, JsonWireError, NoSuchElementError
from .transport import Transport

logger = logging.getLogger(__name__)


class RemoteSession:
    """
    A stateful automation session on a remote JSON Wire server.

    Every operation is a single blocking HTTP exchange against a URL built
    from the command's path template, with the session id (and element id
    or other path parameters) substituted in. The session id is None until
    ``open()`` succeeds and again after ``quit()`` succeeds.

    A session is not safe to share between threads; open one session per
    thread instead.
    """

    def __init__(
        self,
        capabilities: Optional[dict] = None,
        executor: Optional[str] = None,
        transport: Optional[Transport] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._settings = settings or default_settings
        self.executor = executor.rstrip("/") if executor else self._settings.executor_base
        self.capabilities: dict = dict(capabilities or {})
        self.session_id: Optional[str] = None
        self._owns_transport = transport is None
        self._transport = transport or Transport(
            logger=logger,
            trace=self._settings.trace,
            max_redirects=self._settings.max_redirects,
            timeout=self._settings.request_timeout_seconds,
        )

    # Command routing

    def url(self, command: str, /, **path: Any) -> str:
        """
        Build the fully qualified URL of a command.

        Args:
            command: Command name from COMMANDS
            **path: Extra template parameters (element_id, name, handle)

        Returns:
            Executor URL joined with the filled-in path template
        """
        values = {"session_id": self.session_id or "", **path}
        quoted = {key: quote(str(value), safe="") for key, value in values.items()}
        return self.executor + COMMANDS[command].path.format(**quoted)

    def send_command(
        self,
        command: str,
        /,
        params: Any = None,
        shape: Optional[TypeAdapter] = None,
        **path: Any,
    ) -> Any:
        """
        Send a command and decode its reply value.

        Args:
            command: Command name from COMMANDS
            params: JSON parameters, None for no body
            shape: Expected reply value shape; None discards the reply
            **path: Extra template parameters

        Returns:
            The decoded value, or None when no shape was requested
        """
        method = COMMANDS[command].method
        data = self._transport.execute(method, self.url(command, **path), codec.encode(params))
        if shape is None:
            return None
        return codec.decode_reply(data, shape)

    # Session lifecycle

    def open(self, capabilities: Optional[dict] = None) -> str:
        """
        Start a new session on the server.

        Args:
            capabilities: Desired capabilities; replaces the ones given at
                construction when provided

        Returns:
            The new session id

        Raises:
            DecodeError: If the reply does not carry a session id
        """
        if capabilities is not None:
            self.capabilities = dict(capabilities)
        data = self._transport.execute(
            "POST",
            self.url("new_session"),
            codec.encode({"desiredCapabilities": self.capabilities}),
        )
        envelope = codec.decode_envelope(data)

        session_id = envelope.session_id
        if not session_id and isinstance(envelope.value, dict):
            session_id = envelope.value.get("sessionId")
        if not session_id or not isinstance(session_id, str):
            raise DecodeError("New session reply carries no session id")

        self.session_id = session_id
        logger.info(f"Opened session {session_id} on {self.executor}")
        return session_id

    def quit(self) -> None:
        """End the session; the session id is kept if the server refuses."""
        self.send_command("quit")
        logger.info(f"Closed session {self.session_id}")
        self.session_id = None

    def close(self) -> None:
        """Release the HTTP transport if this session created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "RemoteSession":
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            if self.session_id:
                try:
                    self.quit()
                except JsonWireError as e:
                    logger.warning(f"Error closing session {self.session_id}: {e}")
        finally:
            self.close()

    # Server

    def status(self) -> ServerStatus:
        return self.send_command("status", shape=codec.SERVER_STATUS)

    def sessions(self) -> list[SessionInfo]:
        """Sessions currently open on the server."""
        return self.send_command("get_sessions", shape=codec.SESSIONS)

    def get_capabilities(self) -> dict:
        """Capabilities the server granted to this session."""
        return self.send_command("get_capabilities", shape=codec.CAPABILITIES)

    # Timeouts

    def set_timeout(self, kind: str, ms: int) -> None:
        """Set a named timeout ("script", "implicit" or "page load")."""
        self.send_command("set_timeout", {"type": kind, "ms": ms})

    def set_async_script_timeout(self, ms: int) -> None:
        self.send_command("set_async_script_timeout", {"ms": ms})

    def set_implicit_wait_timeout(self, ms: int) -> None:
        self.send_command("set_implicit_wait_timeout", {"ms": ms})

    # IME

    def available_engines(self) -> list[str]:
        return self.send_command("ime_available_engines", shape=codec.STRINGS)

    def active_engine(self) -> str:
        return self.send_command("ime_active_engine", shape=codec.STRING)

    def is_engine_activated(self) -> bool:
        return self.send_command("ime_is_activated", shape=codec.BOOL)

    def activate_engine(self, engine: str) -> None:
        self.send_command("ime_activate", {"engine": engine})

    def deactivate_engine(self) -> None:
        self.send_command("ime_deactivate")

    # Navigation

    def get(self, url: str) -> None:
        """Navigate to a URL."""
        self.send_command("get", {"url": url})

    def current_url(self) -> str:
        return self.send_command("current_url", shape=codec.STRING)

    def back(self) -> None:
        self.send_command("back")

    def forward(self) -> None:
        self.send_command("forward")

    def refresh(self) -> None:
        self.send_command("refresh")

    def title(self) -> str:
        return self.send_command("title", shape=codec.STRING)

    def page_source(self) -> str:
        return self.send_command("page_source", shape=codec.STRING)

    # Windows and frames

    def current_window_handle(self) -> str:
        return self.send_command("current_window_handle", shape=codec.STRING)

    def window_handles(self) -> list[str]:
        return self.send_command("window_handles", shape=codec.STRINGS)

    def switch_window(self, name: str) -> None:
        self.send_command("switch_window", {"name": name})

    def close_window(self) -> None:
        """Close the current window."""
        self.send_command("close_window")

    def switch_frame(self, frame: Union[str, int, Element, None]) -> None:
        """Switch to a frame by name/id, index or element; None selects the top document."""
        self.send_command("switch_frame", {"id": frame})

    def window_size(self, handle: str = "current") -> Size:
        return self.send_command("window_size", shape=codec.SIZE, handle=handle)

    def resize_window(self, handle: str, size: Size) -> None:
        # Pixels; servers reject fractional sizes
        params = {"width": int(size.width), "height": int(size.height)}
        self.send_command("resize_window", params, handle=handle)

    def window_position(self, handle: str = "current") -> Point:
        return self.send_command("window_position", shape=codec.POINT, handle=handle)

    def move_window(self, handle: str, point: Point) -> None:
        params = {"x": int(point.x), "y": int(point.y)}
        self.send_command("move_window", params, handle=handle)

    # Element discovery

    def locate(self, command: str, by: str, value: str, **path: Any) -> Element:
        """
        Run a find-one command and wrap the reply in an Element.

        Raises:
            NoSuchElementError: If the reply carries no element
        """
        params = {"using": get_by_strategy(by), "value": value}
        return self._element_from_value(self.send_command(command, params, codec.ANY, **path))

    def locate_all(self, command: str, by: str, value: str, **path: Any) -> list[Element]:
        """Run a find-many command; no matches is an empty list."""
        params = {"using": get_by_strategy(by), "value": value}
        refs = self.send_command(command, params, codec.ELEMENTS, **path)
        return [Element(ref.id, self) for ref in refs]

    def _element_from_value(self, raw: Any) -> Element:
        if raw is None or raw == {} or raw == []:
            raise NoSuchElementError("reply carried no element")
        ref = codec.decode_value(raw, codec.ELEMENT)
        if not ref.id:
            raise NoSuchElementError("reply carried an empty element id")
        return Element(ref.id, self)

    def find_element(self, by: str, value: str) -> Element:
        """
        Find the first element matching a locator.

        Args:
            by: Locator strategy, e.g. "css selector" or the short name "css"
            value: Selector

        Raises:
            NoSuchElementError: If nothing matches
        """
        return self.locate("find_element", by, value)

    def find_elements(self, by: str, value: str) -> list[Element]:
        return self.locate_all("find_elements", by, value)

    def active_element(self) -> Element:
        """The element that currently has focus."""
        return self._element_from_value(self.send_command("active_element", shape=codec.ANY))

    # Cookies

    def get_cookies(self) -> list[Cookie]:
        return self.send_command("get_cookies", shape=codec.COOKIES)

    def add_cookie(self, cookie: Union[Cookie, dict]) -> None:
        self.send_command("add_cookie", {"cookie": cookie})

    def delete_cookie(self, name: str) -> None:
        self.send_command("delete_cookie", name=name)

    def delete_all_cookies(self) -> None:
        self.send_command("delete_all_cookies")

    # Input devices

    def click(self, button: int = 0) -> None:
        """Click at the current mouse position (0 left, 1 middle, 2 right)."""
        self.send_command("click", {"button": button})

    def double_click(self) -> None:
        self.send_command("double_click")

    def button_down(self) -> None:
        self.send_command("button_down")

    def button_up(self) -> None:
        self.send_command("button_up")

    def send_modifier(self, modifier: str, is_down: bool) -> None:
        """Press or release a modifier key, e.g. selenium's Keys.SHIFT."""
        self.send_command("send_modifier", {"value": modifier, "isdown": is_down})

    def move_to(
        self,
        element: Optional[Element] = None,
        x_offset: Optional[int] = None,
        y_offset: Optional[int] = None,
    ) -> None:
        """Move the mouse to an element and/or by an offset."""
        params: dict[str, Any] = {}
        if element is not None:
            params["element"] = element.id
        if x_offset is not None:
            params["xoffset"] = x_offset
        if y_offset is not None:
            params["yoffset"] = y_offset
        self.send_command("move_to", params)

    # Alerts

    def dismiss_alert(self) -> None:
        self.send_command("dismiss_alert")

    def accept_alert(self) -> None:
        self.send_command("accept_alert")

    def alert_text(self) -> str:
        return self.send_command("alert_text", shape=codec.STRING)

    def set_alert_text(self, text: str) -> None:
        self.send_command("set_alert_text", {"text": text})

    # Scripts

    def execute_script(self, script: str, args: Optional[Sequence[Any]] = None) -> Any:
        """
        Execute JavaScript synchronously in the page.

        Arguments are available to the script as ``arguments[i]``; Element
        arguments are passed by reference and element references in the
        result come back as Element handles.
        """
        return self._execute_script("execute_script", script, args)

    def execute_script_async(self, script: str, args: Optional[Sequence[Any]] = None) -> Any:
        """Execute JavaScript that reports its result through the callback passed as its last argument."""
        return self._execute_script("execute_async_script", script, args)

    def _execute_script(self, command: str, script: str, args: Optional[Sequence[Any]]) -> Any:
        params = {"script": script, "args": list(args) if args is not None else []}
        return self._wrap_elements(self.send_command(command, params, codec.ANY))

    def _wrap_elements(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._wrap_elements(item) for item in value]
        if isinstance(value, dict):
            if len(value) == 1:
                key, ref = next(iter(value.items()))
                if key in (codec.ELEMENT_KEY, codec.W3C_ELEMENT_KEY) and isinstance(ref, str):
                    return Element(ref, self)
            return {key: self._wrap_elements(item) for key, item in value.items()}
        return value

    # Screenshots

    def screenshot(self) -> bytes:
        """Capture the current page as raw image bytes (PNG)."""
        data = self.send_command("screenshot", shape=codec.STRING)
        try:
            return base64.b64decode(data)
        except binascii.Error as e:
            raise DecodeError(f"Screenshot is not valid base64: {e}") from e


def new_remote(
    capabilities: Optional[dict] = None,
    executor: Optional[str] = None,
    **kwargs: Any,
) -> RemoteSession:
    """
    Create a RemoteSession and open it.

    Args:
        capabilities: Desired capabilities, passed through verbatim
        executor: Server URL; defaults to the configured executor_url
        **kwargs: Forwarded to RemoteSession (transport, settings, logger)

    Returns:
        An opened RemoteSession
    """
    session = RemoteSession(capabilities, executor, **kwargs)
    session.open()
    return session
