"""Tests for the linting service client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from speclint import __version__
from speclint.client.lint_client import LintClient
from speclint.exceptions import FormatError, ServiceError, TransportError
from speclint.models import Severity


DOCUMENT = b'{"openapi": "3.0.3", "info": {"title": "Petstore"}}'


# ---------------------------------------------------------------------------
# Context manager
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_enter_creates_client(self) -> None:
        client = LintClient("https://lint.example.com")
        assert client._client is None
        with client:
            assert client._client is not None
        assert client._client is None

    def test_client_closed_on_error(self, service) -> None:
        client = LintClient("https://lint.example.com", transport=service(status_code=500))
        with pytest.raises(ServiceError):
            with client:
                inner = client._client
                client.submit(DOCUMENT)
        assert client._client is None
        assert inner.is_closed

    def test_submit_outside_context_fails(self) -> None:
        with pytest.raises(AssertionError):
            LintClient("https://lint.example.com").submit(DOCUMENT)


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------


class TestRequest:
    def test_posts_envelope_to_api_violations(self, service) -> None:
        transport = service(payload=[])
        with LintClient("https://lint.example.com", transport=transport) as client:
            client.submit(DOCUMENT)

        (request,) = transport.requests
        assert request.method == "POST"
        assert str(request.url) == "https://lint.example.com/api-violations"
        assert json.loads(request.content) == {
            "api_definition": {"openapi": "3.0.3", "info": {"title": "Petstore"}}
        }

    def test_trailing_slash_in_base_url(self, service) -> None:
        transport = service(payload=[])
        with LintClient("https://lint.example.com/", transport=transport) as client:
            client.submit(DOCUMENT)
        assert str(transport.requests[0].url) == "https://lint.example.com/api-violations"

    def test_base_url_with_path_prefix(self, service) -> None:
        transport = service(payload=[])
        with LintClient("https://example.com/zally", transport=transport) as client:
            assert client.url == "https://example.com/zally/api-violations"
            client.submit(DOCUMENT)
        assert str(transport.requests[0].url) == "https://example.com/zally/api-violations"

    def test_headers_without_token(self, service) -> None:
        transport = service(payload=[])
        with LintClient("https://lint.example.com", transport=transport) as client:
            client.submit(DOCUMENT)

        headers = transport.requests[0].headers
        assert headers["content-type"] == "application/json"
        assert headers["user-agent"] == f"speclint/{__version__}"
        assert "authorization" not in headers

    def test_bearer_token(self, service) -> None:
        transport = service(payload=[])
        with LintClient("https://lint.example.com", token="s3cret", transport=transport) as client:
            client.submit(DOCUMENT)
        assert transport.requests[0].headers["authorization"] == "Bearer s3cret"

    def test_empty_token_is_ignored(self) -> None:
        assert "Authorization" not in LintClient("https://x", token="").build_headers()

    def test_body_is_pretty_printed(self) -> None:
        body = LintClient("https://x").build_body(b'{"a": [1, 2]}')
        assert body.startswith(b"{\n")
        assert json.loads(body) == {"api_definition": {"a": [1, 2]}}

    def test_single_attempt(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, text="down")

        with LintClient("https://x", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ServiceError):
                client.submit(DOCUMENT)
        assert len(calls) == 1


# ---------------------------------------------------------------------------
# Response handling
# ---------------------------------------------------------------------------


class TestResponse:
    def test_decodes_violations(self, service, violations_payload: dict[str, Any]) -> None:
        with LintClient("https://x", transport=service(payload=violations_payload)) as client:
            violations = client.submit(DOCUMENT)

        assert len(violations) == 4
        assert len(violations.must()) == 2
        assert violations.violations[1].severity is Severity.SHOULD
        assert violations.message == "This API is not compliant with the guidelines"

    def test_service_unavailable(self, service) -> None:
        transport = service(status_code=503, text="service unavailable")
        with LintClient("https://x", transport=transport) as client:
            with pytest.raises(ServiceError) as exc_info:
                client.submit(DOCUMENT)

        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "service unavailable"
        assert str(exc_info.value) == (
            "Cannot submit file for linting. HTTP Status: 503, Response: service unavailable"
        )

    @pytest.mark.parametrize("status", [201, 204, 400, 401, 404, 500])
    def test_any_non_200_is_service_error(self, service, status: int) -> None:
        with LintClient("https://x", transport=service(status_code=status, text="")) as client:
            with pytest.raises(ServiceError) as exc_info:
                client.submit(DOCUMENT)
        assert exc_info.value.status_code == status

    def test_malformed_response(self, service) -> None:
        with LintClient("https://x", transport=service(text="<html>")) as client:
            with pytest.raises(FormatError, match="Cannot decode"):
                client.submit(DOCUMENT)

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with LintClient("https://x", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError, match="connection refused"):
                client.submit(DOCUMENT)

    def test_timeout_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with LintClient("https://x", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError):
                client.submit(DOCUMENT)
