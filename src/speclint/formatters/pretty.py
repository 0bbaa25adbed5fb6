"""Terminal report with colour-coded severity headings.

Rendering goes through a :class:`rich.console.Console` that writes into a
string buffer. Whether ANSI colour codes are emitted is decided by the
``color`` capability passed to :class:`PrettyFormatter`, never by global
state, so tests can force plain text.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from speclint.formatters.base import UNKNOWN_HEADING, Formatter
from speclint.models import Severity, Violation, ViolationList

SEVERITY_STYLES: dict[str, str] = {
    Severity.MUST.value: "bold red",
    Severity.SHOULD.value: "bold yellow",
    Severity.MAY.value: "bold green",
    Severity.HINT.value: "bold cyan",
    UNKNOWN_HEADING: "bold magenta",
}

_WIDTH = 120


class PrettyFormatter(Formatter):
    """Human-readable report for terminals.

    Args:
        color: Emit ANSI colour codes. With ``False`` the output is plain
            text with the same layout.
    """

    name = "pretty"

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def format(self, violations: ViolationList) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=self.color,
            no_color=not self.color,
            color_system="standard" if self.color else None,
            width=_WIDTH,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

        for heading, group in self.sections(violations):
            self._print_heading(console, heading, SEVERITY_STYLES[heading])
            if not group:
                console.print(Text("  No violations", style="dim"))
            for violation in group:
                self._print_violation(console, violation, unknown=heading == UNKNOWN_HEADING)
            console.print()

        self._print_heading(console, "Summary", "bold")
        for severity, count in violations.counts().items():
            console.print(Text(f"  {severity.value} violations: {count}"))
        if violations.message:
            console.print(Text(f"  Server message: {violations.message}", style="dim"))

        return buffer.getvalue()

    def _print_heading(self, console: Console, heading: str, style: str) -> None:
        console.print(Text(heading, style=style))
        console.print(Text("=" * len(heading), style=style))

    def _print_violation(self, console: Console, violation: Violation, unknown: bool) -> None:
        title = violation.type
        if unknown:
            title = f"{title} [{violation.violation_type or 'missing severity'}]"
        console.print(Text(f"  {title}", style="bold"))
        if violation.description:
            console.print(Text(f"    {violation.description}"))
        if violation.mitigation:
            console.print(Text(f"    Mitigation: {violation.mitigation}"))
        if violation.rule_link:
            console.print(Text(f"    Rule: {violation.rule_link}", style="underline"))
        if violation.paths:
            console.print(Text("    Paths:"))
            for path in violation.paths:
                console.print(Text(f"      {path}", style="dim"))
