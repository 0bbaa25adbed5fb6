"""Abstract base class for report formatters.

A formatter turns a :class:`~speclint.models.ViolationList` into text. Every
implementation renders the same structure:

1. One section per severity in the fixed order ``MUST, SHOULD, MAY, HINT``.
   All four sections are always present; an empty section carries an
   explicit "no violations" marker.
2. An ``UNKNOWN`` section, only when the service reported severities this
   client does not recognise.
3. A summary of counts per severity, followed by the service's message when
   it sent one.

Rendering is a pure function of the violation list, so formatting the same
list twice produces identical text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from speclint.models import Severity, Violation, ViolationList

UNKNOWN_HEADING = "UNKNOWN"


class Formatter(ABC):
    """Base class for all report formatters."""

    name: str = ""

    @abstractmethod
    def format(self, violations: ViolationList) -> str:
        """Render *violations* as a complete report."""

    def write(self, violations: ViolationList, sink: TextIO) -> None:
        """Render *violations* and write the report to *sink*."""
        sink.write(self.format(violations))

    @staticmethod
    def sections(violations: ViolationList) -> list[tuple[str, list[Violation]]]:
        """Return ``(heading, violations)`` pairs in presentation order."""
        result = [(s.value, violations.by_severity(s)) for s in Severity.ordered()]
        unknown = violations.unknown()
        if unknown:
            result.append((UNKNOWN_HEADING, unknown))
        return result
