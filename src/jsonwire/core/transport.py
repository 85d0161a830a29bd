"""HTTP exchange with a JSON Wire server."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .codec import Envelope, decode_envelope
from .exceptions import (
    BadServerReplyError,
    DecodeError,
    ProtocolError,
    TooManyRedirectsError,
    TransportError,
)
from ..utils.error_mapper import SUCCESS, error_for_name, error_for_status

JSON_MIME_TYPE = "application/json"


def _server_message(value) -> Optional[str]:
    """Pull the human readable detail out of a failed reply value."""
    if isinstance(value, dict):
        message = value.get("message")
        return str(message) if message is not None else None
    if isinstance(value, str):
        return value
    return None


def error_from_envelope(envelope: Envelope, allow_named: bool = False) -> Optional[ProtocolError]:
    """
    Return the error a reply envelope reports, if any.

    Args:
        envelope: Decoded reply envelope
        allow_named: Also honour {"value": {"error": "<kind>"}} replies. Only
            safe for HTTP error responses, where the value cannot be a
            legitimate script result.

    Returns:
        ProtocolError to raise, or None for a successful envelope
    """
    message = _server_message(envelope.value)
    if envelope.status != SUCCESS:
        return error_for_status(envelope.status, message)
    if allow_named and isinstance(envelope.value, dict):
        name = envelope.value.get("error")
        if isinstance(name, str) and name:
            return error_for_name(name, message)
    return None


class Transport:
    """
    Performs single command exchanges with the remote end.

    Redirects are followed by hand rather than by httpx, so that every hop
    carries ``Accept: application/json``; the protocol requires it on all
    requests. Replies are classified here: any failure reported by HTTP
    status or envelope status is raised as a typed exception, and only
    successful raw bodies are returned.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        trace: bool = False,
        max_redirects: int = 10,
        timeout: Optional[float] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._log = logger or logging.getLogger(__name__)
        self.trace = trace
        self.max_redirects = max_redirects

    def execute(self, method: str, url: str, body: bytes = b"") -> bytes:
        """
        Send one command and return the raw reply body.

        Args:
            method: HTTP method
            url: Fully qualified command URL
            body: Encoded JSON parameters, empty for none

        Returns:
            Raw reply body; the envelope is still wrapped, or the body is
            empty for commands without a return value

        Raises:
            TransportError: Network failure or redirect limit exceeded
            BadServerReplyError: HTTP error without a readable status envelope
            ProtocolError: The server reported a failed command
            DecodeError: A JSON reply whose envelope could not be decoded
        """
        self._log.debug(f"-> {method} {url} [{len(body)} bytes]")

        headers = {"Accept": JSON_MIME_TYPE}
        if body:
            headers["Content-Type"] = JSON_MIME_TYPE
        try:
            request = self._client.build_request(method, url, content=body or None, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        response = self._send(request)
        redirects = 0
        while response.next_request is not None:
            if redirects >= self.max_redirects:
                raise TooManyRedirectsError(self.max_redirects, str(response.next_request.url))
            redirects += 1
            request = response.next_request
            request.headers["Accept"] = JSON_MIME_TYPE
            self._log.debug(f"-> redirect {redirects}: {request.method} {request.url}")
            response = self._send(request)

        data = response.content
        content_type = response.headers.get("Content-Type", "")
        self._log.debug(
            f"<- {response.status_code} {response.reason_phrase} ({content_type}) [{len(data)} bytes]"
        )

        if response.status_code >= 400:
            try:
                envelope = decode_envelope(data)
            except DecodeError:
                raise BadServerReplyError(response.status_code, response.reason_phrase)
            error = error_from_envelope(envelope, allow_named=True)
            if error is None:
                raise BadServerReplyError(response.status_code, response.reason_phrase)
            raise error

        if content_type.startswith(JSON_MIME_TYPE):
            error = error_from_envelope(decode_envelope(data))
            if error is not None:
                raise error
            return data

        # Nothing was returned, this is OK for some commands
        return data

    def _send(self, request: httpx.Request) -> httpx.Response:
        if self.trace:
            self._log.info(f"-> TRACE\n{self._dump(request, request.read())}")
        try:
            response = self._client.send(request, follow_redirects=False)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e
        if self.trace:
            self._log.info(f"<- TRACE\n{self._dump(response, response.content)}")
        return response

    @staticmethod
    def _dump(message, content: bytes) -> str:
        if isinstance(message, httpx.Request):
            first = f"{message.method} {message.url}"
        else:
            first = f"{message.http_version} {message.status_code} {message.reason_phrase}"
        lines = [first]
        lines.extend(f"{name}: {value}" for name, value in message.headers.items())
        lines.append("")
        lines.append(content.decode("utf-8", errors="replace"))
        return "\n".join(lines)

    def close(self) -> None:
        """Release the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
