"""The ``speclint lint`` command.

Resolves settings, selects the report formatter, and runs the lint pipeline
(:func:`~speclint.lint.run_lint`). The report is printed to stdout before
the exit status is decided:

* exit 0 -- no MUST violations;
* exit 3 -- the report lists at least one MUST violation;
* any other non-zero code -- a pipeline stage failed (see
  :mod:`speclint.exit_codes`) and nothing was rendered.
"""

from __future__ import annotations

from typing import Optional

import typer

from speclint.config import resolve_settings
from speclint.exceptions import SpeclintError
from speclint.exit_codes import EXIT_MUST_VIOLATIONS
from speclint.formatters import get_formatter
from speclint.lint import run_lint
from speclint.output import debug, error, get_output


def lint_command(
    ctx: typer.Context,
    file: str = typer.Argument(
        ..., metavar="FILE", help="API definition file or http(s) URL (JSON or YAML)."
    ),
    format: Optional[str] = typer.Option(
        None, "--format", help="Output format [pretty|markdown]. Default: pretty."
    ),
) -> None:
    """Lint the given FILE with an API definition.

    Example::

        speclint lint openapi.yaml
        speclint lint https://example.com/openapi.json --format markdown
    """
    obj = ctx.obj or {}
    try:
        settings = resolve_settings(
            cli_linter_service=obj.get("linter_service"),
            cli_token=obj.get("token"),
            cli_format=format,
        )
        formatter = get_formatter(settings.format, color=get_output().color)
        debug(f"Linting service: {settings.linter_service}")
        outcome = run_lint(file, settings, formatter)
    except SpeclintError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if not outcome.success:
        error(outcome.reason or "Lint failed")
        raise typer.Exit(code=EXIT_MUST_VIOLATIONS)
