"""Canonical Pydantic models shared across all speclint modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Input models** -- produced while reading the API definition:
    :class:`DocumentFormat`, :class:`RawDocument`, :class:`ViolationRequest`.

**Violation models** -- decoded from the linting service's response:
    :class:`Severity`, :class:`Violation`, :class:`ViolationList`, plus the
    pass/fail :class:`Outcome` derived from them.

**Configuration models** -- persisted as JSON in the user's config directory
or resolved at runtime: :class:`GlobalConfig` and :class:`LintSettings`.

The service response is treated as a versioned contract: unknown fields are
ignored and unknown severity strings land in a separate "unknown" bucket
instead of failing validation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# --- Input ---


class DocumentFormat(str, enum.Enum):
    """Serialisation format of an API definition, inferred from its extension."""

    JSON = "json"
    YAML = "yaml"


class RawDocument(BaseModel):
    """Raw bytes of an API definition plus where they came from.

    Produced by :func:`~speclint.reader.locator.locate` and consumed once by
    :func:`~speclint.reader.readers.read_document`.
    """

    content: bytes
    source: str
    format: DocumentFormat = DocumentFormat.JSON


class ViolationRequest(BaseModel):
    """Request envelope posted to ``/api-violations``."""

    api_definition: Any


# --- Violations ---


class Severity(str, enum.Enum):
    """The four severity levels reported by the linting service.

    Member order is presentation order; severities are never compared
    numerically.
    """

    MUST = "MUST"
    SHOULD = "SHOULD"
    MAY = "MAY"
    HINT = "HINT"

    @classmethod
    def ordered(cls) -> list[Severity]:
        """Return all levels in presentation order (``MUST`` first)."""
        return [cls.MUST, cls.SHOULD, cls.MAY, cls.HINT]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional[Severity]:
        """Map a raw ``violation_type`` string to a level, or ``None`` if unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class Violation(BaseModel):
    """A single rule violation as returned by the linting service.

    ``type`` is the rule title; older service versions send it as ``title``,
    so both keys are accepted. ``violation_type`` keeps the raw severity
    string so that unrecognised values survive decoding.

    Example::

        Violation(
            type="Avoid Link in Header Rule",
            description="Do not use Link headers",
            violation_type="MUST",
        )
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(validation_alias=AliasChoices("type", "title"))
    description: str = ""
    mitigation: Optional[str] = None
    violation_type: str = ""
    rule_link: Optional[str] = None
    paths: list[str] = Field(default_factory=list)

    @field_validator("description", "violation_type", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("paths", mode="before")
    @classmethod
    def _null_to_no_paths(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def severity(self) -> Optional[Severity]:
        """The parsed severity level, or ``None`` for an unknown value."""
        return Severity.parse(self.violation_type)


class ViolationList(BaseModel):
    """Ordered violations exactly as the service returned them.

    The list is never re-sorted. Every derived view is a filtered copy that
    keeps the original relative order.
    """

    violations: list[Violation] = Field(default_factory=list)
    message: Optional[str] = None

    def __len__(self) -> int:
        return len(self.violations)

    def __iter__(self) -> Iterator[Violation]:  # type: ignore[override]
        return iter(self.violations)

    def by_severity(self, severity: Severity) -> list[Violation]:
        """Return the violations whose severity equals *severity*."""
        return [v for v in self.violations if v.severity == severity]

    def must(self) -> list[Violation]:
        return self.by_severity(Severity.MUST)

    def should(self) -> list[Violation]:
        return self.by_severity(Severity.SHOULD)

    def may(self) -> list[Violation]:
        return self.by_severity(Severity.MAY)

    def hint(self) -> list[Violation]:
        return self.by_severity(Severity.HINT)

    def unknown(self) -> list[Violation]:
        """Return the violations whose ``violation_type`` is not a known level."""
        return [v for v in self.violations if v.severity is None]

    def counts(self) -> dict[Severity, int]:
        """Return the number of violations per level, in presentation order."""
        return {s: len(self.by_severity(s)) for s in Severity.ordered()}


@dataclass(frozen=True)
class Outcome:
    """Final result of a lint invocation.

    Attributes:
        success: ``True`` when no MUST violations were found.
        reason: Human-readable failure reason, ``None`` on success.
    """

    success: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> Outcome:
        return cls(success=True)

    @classmethod
    def failure(cls, reason: str) -> Outcome:
        return cls(success=False, reason=reason)

    @classmethod
    def from_violations(cls, violations: ViolationList) -> Outcome:
        """Fail when at least one MUST violation is present."""
        count = len(violations.must())
        if count > 0:
            return cls.failure(f"Failing because: {count} must violation(s) found")
        return cls.ok()


# --- Configuration ---


DEFAULT_LINTER_SERVICE = "http://localhost:8000"


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/speclint/config.json``.

    Loaded and saved by :func:`~speclint.config.load_global_config` and
    :func:`~speclint.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. The auth token is deliberately absent: it is
    only ever taken from ``--token`` or ``SPECLINT_TOKEN``.
    """

    linter_service: str = Field(
        default=DEFAULT_LINTER_SERVICE, description="Base URL of the linting service"
    )
    format: str = Field(
        default="pretty", description="Report format: pretty, markdown"
    )


class LintSettings(BaseModel):
    """Effective settings for one lint invocation after precedence resolution."""

    linter_service: str = DEFAULT_LINTER_SERVICE
    token: Optional[str] = None
    format: str = "pretty"
