"""Shared test fixtures for speclint.

Provides reusable fixtures for loading fixture files, isolating config
directories, faking the linting service, and running CLI commands. These
fixtures are automatically discovered by pytest and available to all test
modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from speclint.models import Violation, ViolationList
from speclint.output import OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time.
    When Typer's CliRunner redirects the streams during a test, the cached
    reference becomes stale once the test finishes.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


@pytest.fixture
def violations_payload() -> dict[str, Any]:
    """Raw service response with 2 MUST, 1 SHOULD, and 1 HINT violation."""
    with open(FIXTURES_DIR / "violations.json") as f:
        return json.load(f)


@pytest.fixture
def petstore_yaml(tmp_path: Path) -> Path:
    """Copy of the petstore YAML spec inside tmp_path."""
    path = tmp_path / "petstore.yaml"
    path.write_text((FIXTURES_DIR / "petstore.yaml").read_text(encoding="utf-8"), encoding="utf-8")
    return path


@pytest.fixture
def petstore_json(tmp_path: Path) -> Path:
    """Copy of the petstore JSON spec inside tmp_path."""
    path = tmp_path / "petstore.json"
    path.write_text((FIXTURES_DIR / "petstore.json").read_text(encoding="utf-8"), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Violation builders
# ---------------------------------------------------------------------------


def _violation(
    severity: str = "MUST",
    type: str = "Some Rule",
    description: str = "Something is wrong",
    mitigation: str | None = None,
    **kwargs: Any,
) -> Violation:
    return Violation(
        type=type,
        description=description,
        mitigation=mitigation,
        violation_type=severity,
        **kwargs,
    )


@pytest.fixture
def sample_violations() -> ViolationList:
    """Two MUST violations and one SHOULD, interleaved."""
    return ViolationList(
        violations=[
            _violation("MUST", "First Must", "first must description", "fix the first"),
            _violation("SHOULD", "Only Should", "should description"),
            _violation("MUST", "Second Must", "second must description"),
        ]
    )


# ---------------------------------------------------------------------------
# Fake linting service
# ---------------------------------------------------------------------------


@pytest.fixture
def service() -> Callable[..., httpx.MockTransport]:
    """Factory for a MockTransport standing in for the linting service.

    Every request is appended to ``transport.requests`` so tests can assert
    on what was sent.
    """

    def _factory(
        payload: Any = None,
        status_code: int = 200,
        text: str | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload if payload is not None else [])

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _factory


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME into tmp_path, clears all
    SPECLINT_* environment variables, and changes the working directory to
    tmp_path.
    """
    monkeypatch.setattr("speclint.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in [
        "SPECLINT_LINTER_SERVICE",
        "SPECLINT_TOKEN",
        "SPECLINT_FORMAT",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet, colourless OutputManager as the global output."""
    output = OutputManager(no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
