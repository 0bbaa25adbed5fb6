"""Markdown report, suitable for pull request comments and chat tools."""

from __future__ import annotations

from speclint.formatters.base import UNKNOWN_HEADING, Formatter
from speclint.models import Violation, ViolationList


class MarkdownFormatter(Formatter):
    """Render one ``##`` section per severity and one bullet per violation."""

    name = "markdown"

    def format(self, violations: ViolationList) -> str:
        lines: list[str] = []
        for heading, group in self.sections(violations):
            lines.append(f"## {heading}")
            lines.append("")
            if not group:
                lines.append("_No violations._")
            for violation in group:
                lines.extend(self._violation_lines(violation, unknown=heading == UNKNOWN_HEADING))
            lines.append("")

        lines.append("## Summary")
        lines.append("")
        lines.append("| Severity | Count |")
        lines.append("|----------|-------|")
        for severity, count in violations.counts().items():
            lines.append(f"| {severity.value} | {count} |")
        if violations.message:
            lines.append("")
            lines.append(f"> {violations.message}")

        return "\n".join(lines) + "\n"

    def _violation_lines(self, violation: Violation, unknown: bool) -> list[str]:
        title = f"**{violation.type}**"
        if unknown:
            title += f" ({violation.violation_type or 'missing severity'})"
        first = f"- {title}: {violation.description}" if violation.description else f"- {title}"

        lines = [first]
        if violation.mitigation:
            lines.append(f"  - Mitigation: {violation.mitigation}")
        if violation.rule_link:
            lines.append(f"  - Rule: <{violation.rule_link}>")
        if violation.paths:
            lines.append("  - Paths: " + ", ".join(f"`{p}`" for p in violation.paths))
        return lines
