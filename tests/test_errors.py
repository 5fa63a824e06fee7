"""Tests for swiftlet.errors and the server error boundary."""

import logging

import pytest

from swiftlet.errors import ConfigurationError, ModelNotFound, SwiftletError
from swiftlet.http.query import QueryParams
from swiftlet.http.request import Request
from swiftlet.server.errors import handle_internal_error, render_debug_page


def _request() -> Request:
    return Request(method="GET", path="/index.py", query=QueryParams(b"q=<x>"))


def _raised(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as caught:
        return caught


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, SwiftletError)

    def test_model_not_found(self) -> None:
        exc = ModelNotFound("Ghost")
        assert isinstance(exc, SwiftletError)
        assert isinstance(exc, LookupError)
        assert exc.name == "Ghost"
        assert str(exc) == "No model registered as 'Ghost'"


class TestInternalError:
    def test_production_response_hides_details(self) -> None:
        response = handle_internal_error(_raised(RuntimeError("secret")), _request(), debug=False)
        assert response.status == 500
        assert response.text == "Internal Server Error"
        assert response.content_type.startswith("text/plain")

    def test_debug_response_shows_traceback(self) -> None:
        response = handle_internal_error(_raised(RuntimeError("visible")), _request(), debug=True)
        assert response.status == 500
        assert "RuntimeError: visible" in response.text
        assert "Traceback" in response.text

    def test_logged_with_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="swiftlet.server"):
            handle_internal_error(_raised(RuntimeError("x")), _request(), debug=False)

        record = caplog.records[-1]
        assert record.getMessage() == "500 GET /index.py?q=<x>"
        assert record.exc_info is not None


class TestDebugPage:
    def test_escapes_request_and_message(self) -> None:
        page = render_debug_page(_raised(ValueError("<script>")), _request())
        assert "<script>" not in page
        assert "&lt;script&gt;" in page
        assert "q=&lt;x&gt;" in page
