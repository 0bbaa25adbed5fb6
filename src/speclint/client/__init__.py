"""HTTP client for the linting service.

Provides :class:`LintClient`, which posts a canonical JSON document to the
service's ``/api-violations`` endpoint and decodes the reply into a
:class:`~speclint.models.ViolationList`.

Sub-modules:

* :mod:`~speclint.client.lint_client` -- request construction, transport,
  and status mapping.
* :mod:`~speclint.client.response` -- decoding of the response body.
"""

from speclint.client.lint_client import LintClient
from speclint.client.response import decode_violations

__all__ = ["LintClient", "decode_violations"]
