"""Decode the linting service's response into a :class:`ViolationList`.

The service has shipped two response shapes over time, and both are
accepted:

* a bare JSON array of violation records, or
* an object with a ``violations`` array and an optional ``message``.

Any other shape, a non-JSON body, or a record that fails validation raises
:class:`~speclint.exceptions.FormatError`.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError

from speclint.exceptions import FormatError
from speclint.models import Violation, ViolationList


def decode_violations(response: httpx.Response) -> ViolationList:
    """Decode a 200 response body into a :class:`ViolationList`.

    Args:
        response: The service response.

    Returns:
        The decoded violations, in response order.

    Raises:
        FormatError: If the body is not a recognised violation payload.
    """
    try:
        payload = json.loads(response.content)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FormatError(f"Cannot decode linting service response: {exc}") from exc
    return parse_violations(payload)


def parse_violations(payload: Any) -> ViolationList:
    """Build a :class:`ViolationList` from already-parsed JSON *payload*.

    Raises:
        FormatError: If *payload* has an unexpected shape or invalid records.
    """
    message = None
    if isinstance(payload, dict):
        records = payload.get("violations", [])
        message = payload.get("message")
        if message is not None and not isinstance(message, str):
            message = str(message)
    else:
        records = payload

    if not isinstance(records, list):
        raise FormatError(
            "Cannot decode linting service response: expected a list of violations, "
            f"got {type(records).__name__}"
        )

    violations: list[Violation] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise FormatError(
                f"Cannot decode linting service response: violation #{index + 1} "
                f"is a {type(record).__name__}, not an object"
            )
        try:
            violations.append(Violation.model_validate(record))
        except ValidationError as exc:
            raise FormatError(
                f"Cannot decode linting service response: violation #{index + 1}: {exc}"
            ) from exc

    return ViolationList(violations=violations, message=message)
