# i18n_scan/common/typed_config/reader.py
#
# Run configuration file reading and the options loader used by the CLI.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from i18n_scan.common.errors import ConfigError
from i18n_scan.common.typed_config.models import ScanOptions
from i18n_scan.common.typed_config.validation import validate_options_dict

CONFIG_ENV_VAR = "I18N_SCAN_CONFIG"
DEFAULT_CONFIG_FILENAME = "i18n-scan.yaml"


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


def find_config_file(explicit: str | os.PathLike[str] | None = None) -> Path | None:
    """Resolve the run configuration file path.

    Resolution order:
    1. explicit argument (must exist)
    2. I18N_SCAN_CONFIG environment variable (if set and non-empty, must exist)
    3. i18n-scan.yaml in the working directory (if present)

    Returns:
        Path to the config file, or None when no file applies.

    Raises:
        ConfigError: If an explicitly requested file does not exist.
    """
    if explicit is not None:
        path = Path(explicit)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            raise ConfigError(f"{CONFIG_ENV_VAR} points to non-existent file: {path}")
        return path

    path = Path(DEFAULT_CONFIG_FILENAME)
    return path if path.is_file() else None


def read_config_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read a YAML run configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Top-level mapping of the file ({} for an empty file).

    Raises:
        ConfigError: If the file cannot be read, has a syntax error
            (line/column attached), or is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        line = None
        column = None
        if hasattr(e, "problem_mark") and e.problem_mark is not None:
            line = e.problem_mark.line + 1  # 0-indexed -> 1-indexed
            column = e.problem_mark.column + 1
        raise ConfigError(f"YAML syntax error in {path}: {e}", line=line, column=column) from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_options(
    config_path: str | os.PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ScanOptions:
    """Build validated ScanOptions from a config file and explicit overrides.

    Overrides win over file values; overrides whose value is None are
    ignored so that unset command-line flags keep the file value.

    Raises:
        ConfigError: If the file is invalid or validation finds errors.
    """
    raw: dict[str, Any] = {}
    path = find_config_file(config_path)
    if path is not None:
        _get_logger().debug("Reading config file %s", path)
        raw.update(read_config_file(path))

    for key, value in (overrides or {}).items():
        if value is not None:
            raw[key] = value

    result = validate_options_dict(raw)
    if result.has_errors:
        raise ConfigError(
            "Invalid configuration:\n" + result.format_report(),
            context={"config_path": str(path) if path else None},
        )
    for issue in result.issues:
        _get_logger().warning("Config warning: %s: %s", issue.field, issue.message)

    return ScanOptions.from_dict(raw)
