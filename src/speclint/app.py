"""Typer application and CLI entry point for speclint.

This module wires together the top-level Typer application and registers
the built-in sub-commands (``lint`` and ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
:class:`~speclint.exceptions.SpeclintError` escaping a command is reported
as a single ``Error:`` line; any other exception is written to a crash log
under the data directory.

See Also:
    :mod:`speclint.config`: Settings precedence resolution.
    :mod:`speclint.output`: Output manager initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from speclint import __version__
from speclint.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="speclint",
    help="Lint API definitions with a remote linting service.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from speclint.commands.config import config_app  # noqa: E402
from speclint.commands.lint import lint_command  # noqa: E402

app.command("lint")(lint_command)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"speclint {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    linter_service: Optional[str] = typer.Option(
        None,
        "--linter-service",
        "-l",
        help="Linting service base URL (env: SPECLINT_LINTER_SERVICE).",
    ),
    token: Optional[str] = typer.Option(
        None, "--token", help="Bearer token for the linting service (env: SPECLINT_TOKEN)."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~speclint.output.OutputManager` from the
    CLI flags and stores the service options in ``ctx.obj`` for the
    sub-commands.
    """
    from speclint.output import OutputManager, set_output

    set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["linter_service"] = linter_service
    ctx.obj["token"] = token


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from speclint.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``speclint`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from speclint.exceptions import SpeclintError
        from speclint.output import error

        if isinstance(exc, SpeclintError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
