"""Tool settings for appstream-lint.

Settings control presentation only (output format, verbosity). The rule
tables are fixed and cannot be changed here.

Precedence (highest to lowest):
1. CLI argument
2. Environment variable (APPSTREAMLINT_<KEY>)
3. Settings file (.appstreamlint.yaml in the given directory)
4. Built-in default

Usage:
    from appstream_lint.config import get_setting

    output_format = get_setting("format", cli_value=cli_format, config_dir=Path.cwd())
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from appstream_lint.constants import CONFIG_FILENAME
from appstream_lint.errors import ConfigInvalidStructureError, ConfigParseError

DEFAULTS: dict[str, Any] = {
    "format": "text",
    "verbose": False,
}

KNOWN_SETTINGS: frozenset[str] = frozenset(DEFAULTS)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def get_config_path(config_dir: Path) -> Path:
    """Get the path to the settings file in a directory."""
    return config_dir / CONFIG_FILENAME


def load_config(config_dir: Path) -> dict[str, Any]:
    """Load settings from .appstreamlint.yaml.

    Args:
        config_dir: Directory that may contain the settings file.

    Returns:
        Settings dictionary. Returns empty dict if the file doesn't exist
        or is empty.

    Raises:
        ConfigParseError: If the file is not valid YAML.
        ConfigInvalidStructureError: If the top level is not a mapping.
    """
    config_file = get_config_path(config_dir)

    if not config_file.exists():
        return {}

    content = config_file.read_text()
    if not content.strip():
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(config_file), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigInvalidStructureError(
            str(config_file), f"expected a mapping, got {type(data).__name__}"
        )
    return data


def _get_env_var_name(key: str) -> str:
    """Convert a setting key to environment variable name (e.g. APPSTREAMLINT_FORMAT)."""
    return f"APPSTREAMLINT_{key.upper()}"


def get_setting(
    key: str,
    cli_value: Any | None = None,
    config_dir: Path | None = None,
) -> Any | None:
    """Resolve a setting with full precedence.

    Args:
        key: Setting key (e.g., "format", "verbose")
        cli_value: Value passed via CLI argument (highest precedence)
        config_dir: Directory holding the settings file, if any

    Returns:
        Resolved value, or the built-in default (None for unknown keys).
    """
    if cli_value is not None:
        return cli_value

    env_value = os.environ.get(_get_env_var_name(key))
    if env_value is not None:
        return env_value

    if config_dir is not None:
        config = load_config(config_dir)
        if key in config:
            return config[key]

    return DEFAULTS.get(key)


def parse_bool(value: Any) -> bool:
    """Interpret a setting value from env or YAML as a boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES
