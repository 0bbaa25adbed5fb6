"""Config commands -- view and modify the user configuration.

Provides the ``speclint config`` sub-command group for reading, updating,
and resetting :class:`~speclint.models.GlobalConfig`. Only the linting
service URL and the default report format are stored; the auth token is
never written to disk.
"""

from __future__ import annotations

import json

import typer

from speclint.output import error, info, print_data, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the stored configuration as JSON.

    Example::

        speclint config show
    """
    from speclint.config import global_config_path, load_global_config
    from speclint.exceptions import ConfigError

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config file: {global_config_path()}")
    print_data(json.dumps(config.model_dump(mode="json"), indent=2))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Config key: linter_service or format."),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Example::

        speclint config set linter_service https://lint.example.com
        speclint config set format markdown
    """
    from speclint.config import load_global_config, save_global_config
    from speclint.exceptions import ConfigError
    from speclint.formatters import FORMATS
    from speclint.models import GlobalConfig

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    data = config.model_dump(mode="json")
    if key not in data:
        error(f"Unknown config key: {key}. Valid keys: {', '.join(data)}")
        raise typer.Exit(code=2)

    if key == "format":
        value = value.lower()
        if value not in FORMATS:
            error(f"Unsupported output format '{value}'. Please use one of: {', '.join(FORMATS)}")
            raise typer.Exit(code=2)
    elif key == "linter_service" and not value.startswith(("http://", "https://")):
        error(f"Linting service must be an http(s) URL, got: {value}")
        raise typer.Exit(code=2)

    data[key] = value
    save_global_config(GlobalConfig.model_validate(data))
    success(f"Set {key} = {value}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset configuration to defaults.

    Example::

        speclint config reset --force
    """
    from speclint.config import save_global_config
    from speclint.models import GlobalConfig

    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
