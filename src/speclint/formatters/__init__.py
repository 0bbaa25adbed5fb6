"""Report formatters -- render a violation list as text.

Two formats are supported and the set is closed:

* ``pretty`` -- :class:`~speclint.formatters.pretty.PrettyFormatter`,
  colour-coded terminal output (plain text when colour is unavailable).
* ``markdown`` -- :class:`~speclint.formatters.markdown.MarkdownFormatter`.

Use :func:`get_formatter` to select one by name.
"""

from speclint.exceptions import ConfigError
from speclint.formatters.base import Formatter
from speclint.formatters.markdown import MarkdownFormatter
from speclint.formatters.pretty import PrettyFormatter

FORMATS = ("pretty", "markdown")


def get_formatter(name: str, color: bool = True) -> Formatter:
    """Return the formatter registered under *name* (case-insensitive).

    Args:
        name: ``pretty`` or ``markdown``.
        color: Colour capability passed to the pretty formatter.

    Raises:
        ConfigError: If *name* is not a supported format.
    """
    normalised = name.strip().lower()
    if normalised == "pretty":
        return PrettyFormatter(color=color)
    if normalised == "markdown":
        return MarkdownFormatter()
    raise ConfigError(
        f"Unsupported output format '{name}'. Please use one of: {', '.join(FORMATS)}"
    )


__all__ = [
    "FORMATS",
    "Formatter",
    "MarkdownFormatter",
    "PrettyFormatter",
    "get_formatter",
]
