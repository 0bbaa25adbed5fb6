"""Input side of the lint pipeline -- locate an API definition and normalise it.

Typical usage::

    from speclint.reader import locate, read_document

    raw = locate("https://example.com/openapi.yaml")
    canonical = read_document(raw)

Sub-modules:

* :mod:`~speclint.reader.locator` -- URL vs. local path detection and
  fetching of the raw bytes.
* :mod:`~speclint.reader.readers` -- JSON and YAML readers producing
  canonical JSON.
"""

from speclint.reader.locator import is_remote, locate
from speclint.reader.readers import detect_format, get_reader, read_document

__all__ = ["is_remote", "locate", "detect_format", "get_reader", "read_document"]
