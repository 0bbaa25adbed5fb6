"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific outcome category and is referenced by the
corresponding :class:`~speclint.exceptions.SpeclintError` subclass.
CI scripts and shell wrappers can inspect the exit code to tell a lint
failure apart from a broken pipeline without parsing stderr.

Example::

    $ speclint lint openapi.yaml
    $ echo $?
    3   # EXIT_MUST_VIOLATIONS -- the service reported MUST violations
"""

EXIT_SUCCESS = 0
"""No MUST violations were found and every stage succeeded."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""Invalid arguments or configuration (e.g. an unsupported output format)."""

EXIT_MUST_VIOLATIONS = 3
"""The report was rendered but contains at least one MUST violation."""

EXIT_IO_ERROR = 4
"""The local API definition file could not be read."""

EXIT_SERVICE_ERROR = 5
"""The linting service answered with a non-200 status."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (DNS failure, connection refused, timeout)."""

EXIT_FORMAT_ERROR = 7
"""The API definition or the service response could not be parsed."""
