"""Built-in CLI sub-commands for speclint.

* :mod:`~speclint.commands.lint` -- submit an API definition and render
  the violations.
* :mod:`~speclint.commands.config` -- view and modify stored settings.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``config``) or a plain callback function
registered directly on the root app (for single commands like ``lint``).
"""
