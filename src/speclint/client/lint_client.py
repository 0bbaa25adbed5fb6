"""HTTP client for the linting service's ``/api-violations`` endpoint.

:class:`LintClient` wraps :class:`httpx.Client` and adds:

- **Request envelope** -- the canonical JSON document is wrapped in a
  :class:`~speclint.models.ViolationRequest` and posted as JSON.
- **Auth injection** -- an ``Authorization: Bearer`` header when a token is
  configured.
- **Error mapping** -- network failures become
  :class:`~speclint.exceptions.TransportError`, any status other than 200
  becomes :class:`~speclint.exceptions.ServiceError`.

There is exactly one attempt per submission: no retry, no backoff, and no
timeout beyond the transport's default. Callers that need a different
timeout or a fake server pass their own ``transport``.
"""

from __future__ import annotations

import json
from typing import Optional

import httpx

from speclint import __version__
from speclint.client.response import decode_violations
from speclint.exceptions import ServiceError, TransportError
from speclint.models import ViolationList, ViolationRequest
from speclint.output import get_output

VIOLATIONS_PATH = "/api-violations"


class LintClient:
    """Synchronous client for submitting API definitions for linting.

    Must be used as a context manager so that the underlying connection is
    released on every exit path.

    Args:
        service_url: Base URL of the linting service.
        token: Optional bearer token. Empty strings are treated as absent.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``
            in tests).

    Example::

        with LintClient("https://lint.example.com", token="abc") as client:
            violations = client.submit(canonical_json)
    """

    def __init__(
        self,
        service_url: str,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._service_url = service_url.rstrip("/")
        self._token = token or None
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> LintClient:
        self._client = httpx.Client(
            base_url=self._service_url,
            headers=self.build_headers(),
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @property
    def url(self) -> str:
        """Full URL submissions are posted to."""
        return f"{self._service_url}{VIOLATIONS_PATH}"

    def build_headers(self) -> dict[str, str]:
        """Return the headers sent with every submission."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"speclint/{__version__}",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def build_body(self, document: bytes) -> bytes:
        """Wrap canonical JSON *document* in the request envelope."""
        envelope = ViolationRequest(api_definition=json.loads(document))
        return envelope.model_dump_json(indent=2).encode("utf-8")

    def submit(self, document: bytes) -> ViolationList:
        """Post *document* to the linting service and decode the violations.

        Args:
            document: Canonical JSON bytes of the API definition.

        Returns:
            The violations in the order the service reported them.

        Raises:
            TransportError: On network-level failures.
            ServiceError: On any status other than 200.
            FormatError: If a 200 response cannot be decoded.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        output = get_output()
        output.debug(f"POST {self.url}")
        try:
            response = self._client.post(VIOLATIONS_PATH, content=self.build_body(document))
        except httpx.RequestError as exc:
            raise TransportError(f"Failed to reach linting service at {self.url}: {exc}") from exc

        output.debug(f"Linting service answered HTTP {response.status_code}")
        if response.status_code != 200:
            raise ServiceError(response.status_code, _read_body(response))

        return decode_violations(response)


def _read_body(response: httpx.Response) -> str:
    """Return the response text, or an empty string if it cannot be read."""
    try:
        return response.text
    except (httpx.HTTPError, UnicodeDecodeError, LookupError):
        return ""
