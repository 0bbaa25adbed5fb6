"""Lint pipeline orchestration.

:func:`run_lint` sequences the whole invocation::

    locate -> read -> submit -> decide -> render -> emit

Every stage fails fast and propagates its
:class:`~speclint.exceptions.SpeclintError` unchanged; nothing is rendered if
the violations could not be obtained. Once the service's answer has been
decoded, the report is always written to stdout, and only then is the
pass/fail :class:`~speclint.models.Outcome` handed back to the caller.
"""

from __future__ import annotations

from typing import Optional

import httpx

from speclint.client import LintClient
from speclint.formatters import Formatter
from speclint.models import LintSettings, Outcome, ViolationList
from speclint.output import get_output
from speclint.reader import locate, read_document


def lint_file(path: str, client: LintClient) -> ViolationList:
    """Read the API definition at *path* and submit it through *client*.

    Args:
        path: Local file path or http(s) URL of the API definition.
        client: An entered :class:`~speclint.client.LintClient`.

    Returns:
        The violations reported by the service.
    """
    output = get_output()
    raw = locate(path)
    output.debug(f"Reading {raw.source} as {raw.format.value.upper()}")
    document = read_document(raw)
    violations = client.submit(document)
    counts = ", ".join(f"{s.value}={n}" for s, n in violations.counts().items())
    output.debug(f"Received {len(violations)} violation(s): {counts}")
    return violations


def run_lint(
    path: str,
    settings: LintSettings,
    formatter: Formatter,
    transport: Optional[httpx.BaseTransport] = None,
) -> Outcome:
    """Lint *path* and print the report to stdout.

    Args:
        path: Local file path or http(s) URL of the API definition.
        settings: Resolved service URL and token.
        formatter: The report formatter.
        transport: Optional httpx transport for the service connection.

    Returns:
        ``Outcome.ok()`` when no MUST violations were found, otherwise a
        failed outcome carrying the reason.

    Raises:
        SpeclintError: If any stage before rendering fails.
    """
    client = LintClient(settings.linter_service, token=settings.token, transport=transport)
    with client:
        violations = lint_file(path, client)

    outcome = Outcome.from_violations(violations)
    get_output().print_data(formatter.format(violations))
    return outcome
