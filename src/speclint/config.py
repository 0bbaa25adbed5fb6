"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for speclint:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.speclint/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~speclint.models.GlobalConfig`
  JSON file storing the default linting service URL and report format.
* **Project config** -- An optional ``./speclint.json`` that pins the
  service URL or format for a repository.
* **Precedence resolution** -- :func:`resolve_settings` merges CLI flags,
  environment variables, project-local config, and global config into the
  effective :class:`~speclint.models.LintSettings`.

The auth token is never stored: it comes from ``--token`` or
``SPECLINT_TOKEN`` only.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from speclint.exceptions import ConfigError
from speclint.models import GlobalConfig, LintSettings

_APP_NAME = "speclint"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "speclint.json"

ENV_LINTER_SERVICE = "SPECLINT_LINTER_SERVICE"
ENV_TOKEN = "SPECLINT_TOKEN"
ENV_FORMAT = "SPECLINT_FORMAT"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/speclint/`` (default ``~/.config/speclint/``).
    On macOS/Windows: ``~/.speclint/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/speclint/`` (default ``~/.local/share/speclint/``).
    On macOS/Windows: ``~/.speclint/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~speclint.models.GlobalConfig`, or a
        default instance if the file does not exist.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./speclint.json``.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file is not a valid JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def resolve_settings(
    cli_linter_service: Optional[str] = None,
    cli_token: Optional[str] = None,
    cli_format: Optional[str] = None,
) -> LintSettings:
    """Resolve the effective settings for a lint run.

    Precedence (high to low):
        1. CLI flags (``--linter-service``, ``--token``, ``--format``)
        2. Environment variables (``SPECLINT_LINTER_SERVICE``,
           ``SPECLINT_TOKEN``, ``SPECLINT_FORMAT``)
        3. Project config (``./speclint.json``)
        4. User config (``~/.config/speclint/config.json``)
        5. Defaults

    The token only has levels 1, 2, and 5.

    Raises:
        ConfigError: If a config file is invalid.
    """
    # 5 + 4
    global_cfg = load_global_config()
    linter_service = global_cfg.linter_service
    fmt = global_cfg.format

    # 3
    project = load_project_config()
    if project is not None:
        linter_service = project.get("linter_service") or linter_service
        fmt = project.get("format") or fmt

    # 2
    linter_service = os.environ.get(ENV_LINTER_SERVICE) or linter_service
    fmt = os.environ.get(ENV_FORMAT) or fmt
    token = os.environ.get(ENV_TOKEN) or None

    # 1
    if cli_linter_service:
        linter_service = cli_linter_service
    if cli_format:
        fmt = cli_format
    if cli_token:
        token = cli_token

    try:
        return LintSettings(linter_service=linter_service, token=token, format=fmt)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
