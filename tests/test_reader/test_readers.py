"""Tests for speclint.reader.readers."""

from __future__ import annotations

import json
import textwrap

import pytest
import yaml

from speclint.exceptions import FormatError
from speclint.models import DocumentFormat, RawDocument
from speclint.reader.readers import (
    JSONReader,
    YAMLReader,
    detect_format,
    get_reader,
    read_document,
)


# ---------------------------------------------------------------------------
# Format detection
# ---------------------------------------------------------------------------


class TestDetectFormat:
    @pytest.mark.parametrize(
        "path",
        [
            "spec.yaml",
            "spec.yml",
            "SPEC.YAML",
            "dir/Spec.Yml",
            "https://example.com/api/openapi.yaml",
            "https://example.com/openapi.yml?ref=main#top",
        ],
    )
    def test_yaml_extensions(self, path: str) -> None:
        assert detect_format(path) is DocumentFormat.YAML

    @pytest.mark.parametrize(
        "path",
        [
            "spec.json",
            "spec",
            "spec.txt",
            "yaml/spec.json",
            "https://example.com/openapi",
            "https://example.com/openapi.json?format=yaml",
        ],
    )
    def test_everything_else_is_json(self, path: str) -> None:
        assert detect_format(path) is DocumentFormat.JSON

    def test_get_reader(self) -> None:
        assert isinstance(get_reader(DocumentFormat.JSON), JSONReader)
        assert isinstance(get_reader(DocumentFormat.YAML), YAMLReader)


# ---------------------------------------------------------------------------
# JSON reader
# ---------------------------------------------------------------------------


class TestJSONReader:
    def test_valid_json_passes_through(self) -> None:
        content = b'{"openapi": "3.0.3", "paths": {}}'
        result = JSONReader().read(content)
        assert json.loads(result) == {"openapi": "3.0.3", "paths": {}}

    def test_malformed_json(self) -> None:
        with pytest.raises(FormatError, match="Invalid JSON"):
            JSONReader().read(b"{")

    def test_error_mentions_location(self) -> None:
        with pytest.raises(FormatError, match="line 2"):
            JSONReader().read(b'{\n  "a": ,\n}')

    def test_empty_document(self) -> None:
        with pytest.raises(FormatError, match="Empty JSON"):
            JSONReader().read(b"   \n")

    def test_undecodable_bytes(self) -> None:
        with pytest.raises(FormatError):
            JSONReader().read(b"\xff\xfe\xfa{")


# ---------------------------------------------------------------------------
# YAML reader
# ---------------------------------------------------------------------------


class TestYAMLReader:
    def test_converts_to_json(self) -> None:
        content = textwrap.dedent("""\
            openapi: "3.0.3"
            info:
              title: YAML Test
              version: "1.0.0"
            paths: {}
        """).encode()
        result = json.loads(YAMLReader().read(content))
        assert result == {
            "openapi": "3.0.3",
            "info": {"title": "YAML Test", "version": "1.0.0"},
            "paths": {},
        }

    def test_round_trip_matches_yaml(self, petstore_yaml) -> None:
        content = petstore_yaml.read_bytes()
        converted = json.loads(YAMLReader().read(content))
        assert converted == yaml.safe_load(content)

    def test_non_json_scalars_are_stringified(self) -> None:
        result = json.loads(YAMLReader().read(b"released: 2024-01-15\n"))
        assert result == {"released": "2024-01-15"}

    def test_date_keys_are_stringified(self) -> None:
        result = json.loads(YAMLReader().read(b"paths:\n  2020-01-01: x\n"))
        assert result == {"paths": {"2020-01-01": "x"}}

    def test_numeric_keys_follow_json(self) -> None:
        content = b"responses:\n  200:\n    description: OK\n"
        result = json.loads(YAMLReader().read(content))
        assert result == {"responses": {"200": {"description": "OK"}}}

    def test_self_referencing_document(self) -> None:
        with pytest.raises(FormatError, match="Cannot convert YAML document to JSON"):
            YAMLReader().read(b"&loop [*loop]\n")

    def test_malformed_yaml_reports_location(self) -> None:
        content = b"openapi: 3.0.3\ninfo:\n  title: [unclosed\n"
        with pytest.raises(FormatError, match=r"Invalid YAML: .*line \d+, column \d+"):
            YAMLReader().read(content)

    def test_tab_indentation_is_rejected(self) -> None:
        with pytest.raises(FormatError, match="Invalid YAML"):
            YAMLReader().read(b"a:\n\tb: 1\n")

    def test_empty_document(self) -> None:
        with pytest.raises(FormatError, match="Empty YAML"):
            YAMLReader().read(b"")


# ---------------------------------------------------------------------------
# read_document
# ---------------------------------------------------------------------------


class TestReadDocument:
    def test_dispatches_on_format(self) -> None:
        raw = RawDocument(content=b"a: 1\n", source="x.yaml", format=DocumentFormat.YAML)
        assert json.loads(read_document(raw)) == {"a": 1}

    def test_yaml_content_with_json_extension_fails(self) -> None:
        raw = RawDocument(content=b"a: 1\n", source="x.json", format=DocumentFormat.JSON)
        with pytest.raises(FormatError):
            read_document(raw)
