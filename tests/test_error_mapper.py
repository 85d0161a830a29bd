"""Unit tests for status code classification."""

import pytest

from jsonwire.utils.error_mapper import (
    EXCEPTION_MAP,
    STATUS_CODE_MAP,
    ErrorKind,
    classify,
    error_for_name,
    error_for_status,
)
from jsonwire.core.exceptions import (
    CommandTimeoutError,
    InvalidSelectorError,
    NoAlertOpenError,
    NoSuchElementError,
    ProtocolError,
    StaleElementReferenceError,
    UnknownError,
    UnknownServerError,
)

DOCUMENTED = {
    7: "no such element",
    8: "no such frame",
    9: "unknown command",
    10: "stale element reference",
    11: "element not visible",
    12: "invalid element state",
    13: "unknown error",
    15: "element is not selectable",
    17: "javascript error",
    19: "xpath lookup error",
    21: "timeout",
    23: "no such window",
    24: "invalid cookie domain",
    25: "unable to set cookie",
    26: "unexpected alert open",
    27: "no alert open",
    28: "script timeout",
    29: "invalid element coordinates",
    32: "invalid selector",
}


class TestClassify:
    """Tests for status code to error kind mapping."""

    @pytest.mark.parametrize("code,kind", sorted(DOCUMENTED.items()))
    def test_documented_codes(self, code, kind):
        """Every documented code classifies to its kind."""
        assert classify(code) == ErrorKind(kind)

    def test_table_matches_documented_codes(self):
        """The table holds exactly the documented codes."""
        assert set(STATUS_CODE_MAP) == set(DOCUMENTED)

    @pytest.mark.parametrize("code", [1, 6, 14, 16, 20, 22, 30, 31, 33, 99, 500])
    def test_unlisted_codes(self, code):
        """Codes outside the table are not classified."""
        assert classify(code) is None

    def test_every_kind_has_exception(self):
        """Each kind maps to an exception whose status matches the table."""
        for code, kind in STATUS_CODE_MAP.items():
            exc_class = EXCEPTION_MAP[kind]
            assert exc_class.status == code
            assert exc_class.kind == kind.value


class TestErrorForStatus:
    """Tests for building exceptions from status codes."""

    def test_no_such_element(self):
        exc = error_for_status(7, "Unable to locate element")

        assert isinstance(exc, NoSuchElementError)
        assert exc.status == 7
        assert exc.server_message == "Unable to locate element"
        assert "no such element" in str(exc)
        assert "Unable to locate element" in str(exc)

    def test_stale_element(self):
        assert isinstance(error_for_status(10), StaleElementReferenceError)

    def test_timeout(self):
        assert isinstance(error_for_status(21), CommandTimeoutError)

    def test_invalid_selector(self):
        assert isinstance(error_for_status(32), InvalidSelectorError)

    @pytest.mark.parametrize("code", [1, 42, 404])
    def test_unknown_code_carries_code(self, code):
        """Unlisted codes produce UnknownServerError with the exact code."""
        exc = error_for_status(code)

        assert isinstance(exc, UnknownServerError)
        assert isinstance(exc, ProtocolError)
        assert exc.code == code
        assert exc.status == code
        assert str(code) in str(exc)

    def test_status_13_is_not_unknown_server_error(self):
        """Status 13 is documented, so it is not an unclassified code."""
        exc = error_for_status(13)

        assert isinstance(exc, UnknownError)
        assert not isinstance(exc, UnknownServerError)


class TestErrorForName:
    """Tests for replies that name their error."""

    def test_known_name(self):
        assert isinstance(error_for_name("no such element"), NoSuchElementError)

    def test_alias(self):
        assert isinstance(error_for_name("no such alert"), NoAlertOpenError)

    def test_case_insensitive(self):
        assert isinstance(error_for_name("Stale Element Reference"), StaleElementReferenceError)

    def test_unknown_name(self):
        exc = error_for_name("session not created", "no browser")

        assert isinstance(exc, UnknownError)
        assert "session not created" in str(exc)
        assert "no browser" in str(exc)
