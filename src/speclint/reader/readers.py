"""Normalise an API definition into canonical JSON.

There are exactly two readers, selected by file extension:

* :class:`YAMLReader` for ``.yml`` / ``.yaml`` (case-insensitive) -- parses
  the YAML and re-serialises it as JSON.
* :class:`JSONReader` for everything else -- validates the JSON and passes it
  through unchanged.

Both raise :class:`~speclint.exceptions.FormatError` on malformed input, with
the line and column of the problem when the parser reports one.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlsplit

import yaml

from speclint.exceptions import FormatError
from speclint.models import DocumentFormat, RawDocument

_YAML_EXTENSIONS = (".yml", ".yaml")


def detect_format(path: str) -> DocumentFormat:
    """Infer the document format from the extension of *path*.

    For URLs only the path component is considered, so
    ``https://host/openapi.yaml?ref=main`` is still YAML.
    """
    if path.startswith(("http://", "https://")):
        path = urlsplit(path).path
    suffix = PurePosixPath(path.replace("\\", "/")).suffix.lower()
    if suffix in _YAML_EXTENSIONS:
        return DocumentFormat.YAML
    return DocumentFormat.JSON


class SpecReader(ABC):
    """Convert raw document bytes into canonical JSON bytes."""

    format: DocumentFormat

    @abstractmethod
    def parse(self, content: bytes) -> Any:
        """Parse *content* into a JSON-compatible Python value.

        Raises:
            FormatError: If the content is malformed.
        """

    def read(self, content: bytes) -> bytes:
        """Return *content* as canonical JSON bytes.

        Raises:
            FormatError: If the content is empty or malformed.
        """
        if not content.strip():
            raise FormatError(f"Empty {self.format.value.upper()} document")
        return self._serialise(self.parse(content))

    def _serialise(self, value: Any) -> bytes:
        try:
            text = json.dumps(_with_json_keys(value), ensure_ascii=False, default=str)
        except (TypeError, ValueError, RecursionError) as exc:
            raise FormatError(
                f"Cannot convert {self.format.value.upper()} document to JSON: {exc}"
            ) from exc
        return text.encode("utf-8")


def _with_json_keys(value: Any) -> Any:
    """Return *value* with every mapping key that JSON cannot hold turned into a string."""
    if isinstance(value, dict):
        return {_json_key(key): _with_json_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_with_json_keys(item) for item in value]
    return value


def _json_key(key: Any) -> Any:
    # YAML allows dates and other scalars as keys; json.dumps only takes these.
    if key is None or isinstance(key, (str, int, float, bool)):
        return key
    return str(key)


class JSONReader(SpecReader):
    """Validate a JSON document."""

    format = DocumentFormat.JSON

    def parse(self, content: bytes) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise FormatError(f"Invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise FormatError(f"Invalid JSON: cannot decode input ({exc})") from exc

    def read(self, content: bytes) -> bytes:
        if not content.strip():
            raise FormatError("Empty JSON document")
        self.parse(content)
        # Already valid JSON; keep the caller's bytes.
        return content


class YAMLReader(SpecReader):
    """Parse a YAML document and convert it to JSON."""

    format = DocumentFormat.YAML

    def parse(self, content: bytes) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise FormatError(f"Invalid YAML: {_describe_yaml_error(exc)}") from exc


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    """Build a one-line description of a YAML error, including its location."""
    mark = getattr(exc, "problem_mark", None)
    problem = getattr(exc, "problem", None)
    if problem and mark is not None:
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    if problem:
        return str(problem)
    return " ".join(str(exc).split())


_READERS: dict[DocumentFormat, SpecReader] = {
    DocumentFormat.JSON: JSONReader(),
    DocumentFormat.YAML: YAMLReader(),
}


def get_reader(fmt: DocumentFormat) -> SpecReader:
    """Return the reader for *fmt*."""
    return _READERS[fmt]


def read_document(raw: RawDocument) -> bytes:
    """Convert a located document into canonical JSON bytes.

    Raises:
        FormatError: If the document is empty or malformed.
    """
    return get_reader(raw.format).read(raw.content)
