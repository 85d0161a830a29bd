"""Tests for the HTTP transport."""

import json
import logging

import httpx
import pytest

from jsonwire.core.exceptions import (
    BadServerReplyError,
    DecodeError,
    NoSuchElementError,
    StaleElementReferenceError,
    TooManyRedirectsError,
    TransportError,
    UnknownError,
    UnknownServerError,
)
from jsonwire.core.transport import Transport

BASE = "http://wd.test"


def redirect_chain(fake_server, hops):
    """Register /hop/0 .. /hop/<hops> where every hop but the last redirects."""
    for i in range(hops):
        fake_server.route(
            "GET",
            f"/hop/{i}",
            httpx.Response(302, headers={"Location": f"/hop/{i + 1}"}),
        )
    fake_server.route("GET", f"/hop/{hops}", httpx.Response(200, json={"status": 0, "value": "done"}))


class TestHeaders:
    """Tests for request headers."""

    def test_accept_header(self, transport, fake_server):
        fake_server.route("GET", "/status", httpx.Response(200, json={"status": 0}))

        transport.execute("GET", f"{BASE}/status")

        assert fake_server.last.headers["Accept"] == "application/json"

    def test_content_type_with_body(self, transport, fake_server):
        fake_server.route("POST", "/session/1/url", httpx.Response(200, text=""))

        transport.execute("POST", f"{BASE}/session/1/url", b'{"url": "http://x"}')

        assert fake_server.last.headers["Content-Type"] == "application/json"
        assert fake_server.last.content == b'{"url": "http://x"}'

    def test_no_content_type_without_body(self, transport, fake_server):
        fake_server.route("POST", "/session/1/back", httpx.Response(200, text=""))

        transport.execute("POST", f"{BASE}/session/1/back")

        assert "Content-Type" not in fake_server.last.headers


class TestRedirects:
    """Tests for manual redirect handling."""

    def test_ten_redirects_succeed(self, transport, fake_server):
        redirect_chain(fake_server, 10)

        body = transport.execute("GET", f"{BASE}/hop/0")

        assert b"done" in body
        assert len(fake_server.requests) == 11

    def test_eleven_redirects_fail(self, transport, fake_server):
        """The 11th redirect is refused before it is followed."""
        redirect_chain(fake_server, 11)

        with pytest.raises(TooManyRedirectsError) as exc:
            transport.execute("GET", f"{BASE}/hop/0")

        assert exc.value.max_redirects == 10
        assert "/hop/11" in exc.value.url
        assert [r.url.path for r in fake_server.requests] == [f"/hop/{i}" for i in range(11)]
        assert "/hop/11" not in [r.url.path for r in fake_server.requests]

    def test_accept_header_on_every_hop(self, transport, fake_server):
        redirect_chain(fake_server, 11)

        with pytest.raises(TooManyRedirectsError):
            transport.execute("GET", f"{BASE}/hop/0")

        for request in fake_server.requests:
            assert request.headers["Accept"] == "application/json"

    def test_custom_limit(self, http_client, fake_server):
        redirect_chain(fake_server, 3)
        transport = Transport(client=http_client, max_redirects=2)

        with pytest.raises(TooManyRedirectsError):
            transport.execute("GET", f"{BASE}/hop/0")

        assert len(fake_server.requests) == 3

    def test_see_other_after_post(self, transport, fake_server):
        """A 303 after POST is followed with GET and keeps the Accept header."""
        fake_server.route(
            "POST", "/session", httpx.Response(303, headers={"Location": "/session/abc"})
        )
        fake_server.route(
            "GET",
            "/session/abc",
            httpx.Response(200, json={"sessionId": "abc", "status": 0, "value": {}}),
        )

        body = transport.execute("POST", f"{BASE}/session", b'{"desiredCapabilities": {}}')

        assert b'"abc"' in body
        assert fake_server.last.method == "GET"
        assert fake_server.last.headers["Accept"] == "application/json"

    def test_client_redirect_setting_is_overridden(self, fake_server):
        """Redirects stay under our control even if the client would follow them."""
        redirect_chain(fake_server, 11)
        client = httpx.Client(
            transport=httpx.MockTransport(fake_server.handle), follow_redirects=True
        )

        with pytest.raises(TooManyRedirectsError):
            Transport(client=client).execute("GET", f"{BASE}/hop/0")
        client.close()


class TestHttpErrors:
    """Tests for replies with HTTP status >= 400."""

    def test_non_envelope_body(self, transport, fake_server):
        fake_server.route("GET", "/status", httpx.Response(400, text="not json"))

        with pytest.raises(BadServerReplyError) as exc:
            transport.execute("GET", f"{BASE}/status")

        assert exc.value.http_status == 400
        assert "400 Bad Request" in str(exc.value)

    def test_empty_body(self, transport, fake_server):
        fake_server.route("GET", "/status", httpx.Response(502))

        with pytest.raises(BadServerReplyError) as exc:
            transport.execute("GET", f"{BASE}/status")

        assert exc.value.http_status == 502

    def test_envelope_without_error_code(self, transport, fake_server):
        fake_server.route("GET", "/status", httpx.Response(500, json={"status": 0}))

        with pytest.raises(BadServerReplyError):
            transport.execute("GET", f"{BASE}/status")

    def test_classified_status(self, transport, fake_server):
        fake_server.route(
            "POST",
            "/session/1/element",
            httpx.Response(500, json={"status": 7, "value": {"message": "Unable to locate"}}),
        )

        with pytest.raises(NoSuchElementError) as exc:
            transport.execute("POST", f"{BASE}/session/1/element", b"{}")

        assert exc.value.status == 7
        assert exc.value.server_message == "Unable to locate"

    def test_named_error(self, transport, fake_server):
        fake_server.route(
            "GET",
            "/session/1/element/e/text",
            httpx.Response(404, json={"value": {"error": "stale element reference", "message": "gone"}}),
        )

        with pytest.raises(StaleElementReferenceError):
            transport.execute("GET", f"{BASE}/session/1/element/e/text")

    def test_unknown_status(self, transport, fake_server):
        fake_server.route("GET", "/status", httpx.Response(500, json={"status": 77}))

        with pytest.raises(UnknownServerError) as exc:
            transport.execute("GET", f"{BASE}/status")

        assert exc.value.code == 77


class TestSuccessReplies:
    """Tests for replies with HTTP status < 400."""

    def test_json_success_returns_raw_body(self, transport, fake_server):
        fake_server.route("GET", "/session/1/title", httpx.Response(200, json={"status": 0, "value": "foo"}))

        body = transport.execute("GET", f"{BASE}/session/1/title")

        assert json.loads(body) == {"status": 0, "value": "foo"}

    def test_json_error_status(self, transport, fake_server):
        fake_server.route("GET", "/session/1/title", httpx.Response(200, json={"status": 10, "value": None}))

        with pytest.raises(StaleElementReferenceError):
            transport.execute("GET", f"{BASE}/session/1/title")

    def test_json_error_status_unknown(self, transport, fake_server):
        fake_server.route("GET", "/session/1/title", httpx.Response(200, json={"status": 1234}))

        with pytest.raises(UnknownServerError) as exc:
            transport.execute("GET", f"{BASE}/session/1/title")

        assert exc.value.code == 1234

    def test_named_error_ignored_on_success(self, transport, fake_server):
        """A script result that happens to have an 'error' key is not an error."""
        fake_server.route(
            "POST",
            "/session/1/execute",
            httpx.Response(200, json={"status": 0, "value": {"error": "no such element"}}),
        )

        body = transport.execute("POST", f"{BASE}/session/1/execute", b"{}")

        assert b"no such element" in body

    def test_malformed_json(self, transport, fake_server):
        fake_server.route(
            "GET",
            "/session/1/title",
            httpx.Response(200, content=b"{oops", headers={"Content-Type": "application/json"}),
        )

        with pytest.raises(DecodeError):
            transport.execute("GET", f"{BASE}/session/1/title")

    def test_non_json_passthrough(self, transport, fake_server):
        fake_server.route("POST", "/session/1/refresh", httpx.Response(200, text=""))

        assert transport.execute("POST", f"{BASE}/session/1/refresh") == b""

    def test_json_with_charset(self, transport, fake_server):
        fake_server.route(
            "GET",
            "/session/1/title",
            httpx.Response(
                200,
                content=b'{"status": 13}',
                headers={"Content-Type": "application/json; charset=utf-8"},
            ),
        )

        with pytest.raises(UnknownError) as exc:
            transport.execute("GET", f"{BASE}/session/1/title")

        assert exc.value.status == 13


class TestNetworkErrors:
    """Tests for failures below HTTP."""

    def test_connection_refused(self, fake_server):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(refuse))

        with pytest.raises(TransportError) as exc:
            Transport(client=client).execute("GET", f"{BASE}/status")

        assert isinstance(exc.value.__cause__, httpx.ConnectError)
        client.close()


class TestLogging:
    """Tests for request/response logging."""

    def test_exchange_is_logged(self, http_client, fake_server, caplog):
        logger = logging.getLogger("tests.transport")
        caplog.set_level(logging.DEBUG, logger="tests.transport")
        fake_server.route("GET", "/status", httpx.Response(200, json={"status": 0, "value": {}}))

        Transport(client=http_client, logger=logger).execute("GET", f"{BASE}/status")

        assert f"-> GET {BASE}/status [0 bytes]" in caplog.text
        assert "<- 200 OK (application/json)" in caplog.text
        assert "TRACE" not in caplog.text

    def test_trace_dumps_bodies(self, http_client, fake_server, caplog):
        logger = logging.getLogger("tests.transport.trace")
        caplog.set_level(logging.DEBUG, logger="tests.transport.trace")
        fake_server.route("POST", "/session/1/url", httpx.Response(200, json={"status": 0, "value": "traced"}))

        Transport(client=http_client, logger=logger, trace=True).execute(
            "POST", f"{BASE}/session/1/url", b'{"url": "http://x"}'
        )

        assert "-> TRACE" in caplog.text
        assert "<- TRACE" in caplog.text
        assert '{"url": "http://x"}' in caplog.text
        assert "traced" in caplog.text

    def test_trace_does_not_change_outcome(self, http_client, fake_server):
        fake_server.route("GET", "/status", httpx.Response(500, json={"status": 7}))

        with pytest.raises(NoSuchElementError):
            Transport(client=http_client, trace=True).execute("GET", f"{BASE}/status")


class TestInvalidUrl:
    """Tests for URLs httpx refuses to build."""

    def test_invalid_url_is_transport_error(self, transport, fake_server):
        with pytest.raises(TransportError) as exc:
            transport.execute("GET", "http://[::1/status")

        assert isinstance(exc.value.__cause__, httpx.InvalidURL)
        assert fake_server.requests == []


def test_trace_is_visible_at_info(http_client, fake_server, caplog):
    """Trace output needs only the trace flag, not a DEBUG log level."""
    logger = logging.getLogger("tests.transport.info")
    caplog.set_level(logging.INFO, logger="tests.transport.info")
    fake_server.route("GET", "/status", httpx.Response(200, json={"status": 0, "value": {}}))

    Transport(client=http_client, logger=logger, trace=True).execute("GET", f"{BASE}/status")

    assert "-> TRACE" in caplog.text
    assert "<- TRACE" in caplog.text
    assert "-> GET" not in caplog.text
