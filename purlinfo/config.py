"""Settings for a purlinfo run, from flags, config file and defaults."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from purlinfo.exceptions import ConfigurationError, describe_cause
from purlinfo.models.config import PurlInfoConfig, Settings

logger = logging.getLogger(__name__)

# Searched in this order when no --config is given
CONFIG_FILE_NAMES = (".purlinfo.yaml", ".purlinfo.yml")


def load_settings(
    config_path: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    email: Optional[str] = None,
    timeout: Optional[float] = None,
    search_dir: Optional[Path] = None,
) -> Settings:
    """Build the effective settings for one lookup.

    Flag values that were given win over the config file, and the config
    file wins over built-in defaults.

    Args:
        config_path: Explicit config file. When omitted, `search_dir`
            (default: the working directory) is searched for one.
        base_url: --base-url flag value.
        email: --email flag value.
        timeout: --timeout flag value.
        search_dir: Directory searched for a config file.

    Returns:
        Validated settings with the timeout always set.

    Raises:
        ConfigurationError: If the config file or a flag value is invalid.
    """
    if config_path is not None:
        path: Optional[Path] = Path(config_path)
    else:
        path = _find_config_file(search_dir or Path.cwd())

    file_values = _read_config_file(path) if path is not None else {}
    flag_values = _validate(
        {"base_url": base_url, "email": email, "timeout": timeout},
        "command line options",
    )
    return Settings(**{**file_values, **flag_values})


def _find_config_file(search_dir: Path) -> Optional[Path]:
    for name in CONFIG_FILE_NAMES:
        candidate = search_dir / name
        if candidate.is_file():
            return candidate
    return None


def _read_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file and return the keys it sets."""
    logger.debug("reading configuration from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {describe_cause(e)}"
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {describe_cause(e)}"
        ) from e

    # Empty or comments only
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return _validate(data, f"'{path}'")


def _validate(values: dict[str, Any], source: str) -> dict[str, Any]:
    try:
        config = PurlInfoConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {source}: {describe_cause(e)}"
        ) from e
    return config.model_dump(exclude_none=True)
