"""Command names and the HTTP method and path template each one maps to."""

from typing import NamedTuple


class Command(NamedTuple):
    method: str
    path: str  # str.format template relative to the executor URL


COMMANDS: dict[str, Command] = {
    # Server
    "status": Command("GET", "/status"),
    "new_session": Command("POST", "/session"),
    "get_sessions": Command("GET", "/sessions"),
    "get_capabilities": Command("GET", "/session/{session_id}"),
    "quit": Command("DELETE", "/session/{session_id}"),
    # Timeouts
    "set_timeout": Command("POST", "/session/{session_id}/timeouts"),
    "set_async_script_timeout": Command("POST", "/session/{session_id}/timeouts/async_script"),
    "set_implicit_wait_timeout": Command("POST", "/session/{session_id}/timeouts/implicit_wait"),
    # IME
    "ime_available_engines": Command("GET", "/session/{session_id}/ime/available_engines"),
    "ime_active_engine": Command("GET", "/session/{session_id}/ime/active_engine"),
    "ime_is_activated": Command("GET", "/session/{session_id}/ime/activated"),
    "ime_activate": Command("POST", "/session/{session_id}/ime/activate"),
    "ime_deactivate": Command("POST", "/session/{session_id}/ime/deactivate"),
    # Navigation
    "get": Command("POST", "/session/{session_id}/url"),
    "current_url": Command("GET", "/session/{session_id}/url"),
    "back": Command("POST", "/session/{session_id}/back"),
    "forward": Command("POST", "/session/{session_id}/forward"),
    "refresh": Command("POST", "/session/{session_id}/refresh"),
    "title": Command("GET", "/session/{session_id}/title"),
    "page_source": Command("GET", "/session/{session_id}/source"),
    # Windows and frames
    "current_window_handle": Command("GET", "/session/{session_id}/window_handle"),
    "window_handles": Command("GET", "/session/{session_id}/window_handles"),
    "switch_window": Command("POST", "/session/{session_id}/window"),
    "close_window": Command("DELETE", "/session/{session_id}/window"),
    "switch_frame": Command("POST", "/session/{session_id}/frame"),
    "window_size": Command("GET", "/session/{session_id}/window/{handle}/size"),
    "resize_window": Command("POST", "/session/{session_id}/window/{handle}/size"),
    "window_position": Command("GET", "/session/{session_id}/window/{handle}/position"),
    "move_window": Command("POST", "/session/{session_id}/window/{handle}/position"),
    # Element discovery
    "find_element": Command("POST", "/session/{session_id}/element"),
    "find_elements": Command("POST", "/session/{session_id}/elements"),
    "find_child_element": Command("POST", "/session/{session_id}/element/{element_id}/element"),
    "find_child_elements": Command("POST", "/session/{session_id}/element/{element_id}/elements"),
    "active_element": Command("GET", "/session/{session_id}/element/active"),
    # Element interaction
    "click_element": Command("POST", "/session/{session_id}/element/{element_id}/click"),
    "send_keys": Command("POST", "/session/{session_id}/element/{element_id}/value"),
    "submit": Command("POST", "/session/{session_id}/element/{element_id}/submit"),
    "clear": Command("POST", "/session/{session_id}/element/{element_id}/clear"),
    "tag_name": Command("GET", "/session/{session_id}/element/{element_id}/name"),
    "text": Command("GET", "/session/{session_id}/element/{element_id}/text"),
    "is_selected": Command("GET", "/session/{session_id}/element/{element_id}/selected"),
    "is_enabled": Command("GET", "/session/{session_id}/element/{element_id}/enabled"),
    "is_displayed": Command("GET", "/session/{session_id}/element/{element_id}/displayed"),
    "get_attribute": Command("GET", "/session/{session_id}/element/{element_id}/attribute/{name}"),
    "css_property": Command("GET", "/session/{session_id}/element/{element_id}/css/{name}"),
    "location": Command("GET", "/session/{session_id}/element/{element_id}/location"),
    "location_in_view": Command("GET", "/session/{session_id}/element/{element_id}/location_in_view"),
    "element_size": Command("GET", "/session/{session_id}/element/{element_id}/size"),
    # Cookies
    "get_cookies": Command("GET", "/session/{session_id}/cookie"),
    "add_cookie": Command("POST", "/session/{session_id}/cookie"),
    "delete_all_cookies": Command("DELETE", "/session/{session_id}/cookie"),
    "delete_cookie": Command("DELETE", "/session/{session_id}/cookie/{name}"),
    # Input devices
    "move_to": Command("POST", "/session/{session_id}/moveto"),
    "click": Command("POST", "/session/{session_id}/click"),
    "double_click": Command("POST", "/session/{session_id}/doubleclick"),
    "button_down": Command("POST", "/session/{session_id}/buttondown"),
    "button_up": Command("POST", "/session/{session_id}/buttonup"),
    "send_modifier": Command("POST", "/session/{session_id}/modifier"),
    # Alerts
    "dismiss_alert": Command("POST", "/session/{session_id}/dismiss_alert"),
    "accept_alert": Command("POST", "/session/{session_id}/accept_alert"),
    "alert_text": Command("GET", "/session/{session_id}/alert_text"),
    "set_alert_text": Command("POST", "/session/{session_id}/alert_text"),
    # Scripts
    "execute_script": Command("POST", "/session/{session_id}/execute"),
    "execute_async_script": Command("POST", "/session/{session_id}/execute_async"),
    # Screenshots
    "screenshot": Command("GET", "/session/{session_id}/screenshot"),
}
