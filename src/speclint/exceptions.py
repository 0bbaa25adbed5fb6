"""Exception hierarchy for speclint.

All exceptions inherit from :class:`SpeclintError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`speclint.exit_codes`.
The top-level error handler in :func:`speclint.app.main` catches
``SpeclintError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    SpeclintError (exit 1)
    +-- ConfigError      (exit 2)
    +-- IOError_         (exit 4)
    +-- ServiceError     (exit 5)
    +-- TransportError   (exit 6)
    +-- FormatError      (exit 7)

A lint run that finds MUST violations is not an error: it is reported as a
failed :class:`~speclint.models.Outcome` after the report has been rendered.
"""

from speclint.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_IO_ERROR,
    EXIT_SERVICE_ERROR,
)


class SpeclintError(Exception):
    """Base exception for all speclint errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`speclint.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(SpeclintError):
    """Raised for configuration problems (unsupported output format, invalid config file)."""

    exit_code = EXIT_INVALID_USAGE


class IOError_(SpeclintError):
    """Raised when a local API definition cannot be read.

    Named with a trailing underscore to avoid shadowing the built-in
    ``IOError``. The message is the operating system's error text.
    """

    exit_code = EXIT_IO_ERROR


class TransportError(SpeclintError):
    """Raised on network-level failures reaching a remote spec or the linting service."""

    exit_code = EXIT_CONNECTION_ERROR


class FormatError(SpeclintError):
    """Raised for malformed JSON/YAML input or an undecodable service response."""

    exit_code = EXIT_FORMAT_ERROR


class ServiceError(SpeclintError):
    """Raised when the linting service answers with a status other than 200.

    Args:
        status_code: HTTP status returned by the service.
        body: Raw response body text (empty if it could not be read).
    """

    exit_code = EXIT_SERVICE_ERROR

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(
            f"Cannot submit file for linting. HTTP Status: {status_code}, Response: {body}"
        )
        self.status_code = status_code
        self.body = body
