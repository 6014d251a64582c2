"""Configuration loader module.

This module provides functions for loading configuration from a YAML file and
environment variables and transforming it into a validated ModelsDevConfig.
"""

import logging
import os
import re
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from modelsdev._internal.exceptions import ConfigError

from .schema import ModelsDevConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "MODELSDEV"
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

_config: Optional[ModelsDevConfig] = None
_config_lock = threading.Lock()


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def resolve_env_vars(config: Any) -> Any:
    """Replace ${VAR} patterns with environment variables.

    Unset variables resolve to an empty string.
    """
    if isinstance(config, dict):
        return {key: resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolve_env_vars(item) for item in config]
    if isinstance(config, str) and "${" in config:
        return _ENV_VAR_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), config)
    return config


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML; empty if the file is missing.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", context={"path": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}", context={"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {path} must contain a mapping at the top level",
            context={"path": str(path)},
        )
    return data


def default_config_path() -> Path:
    """Return the configuration file location.

    ``MODELSDEV_CONFIG_PATH`` wins; otherwise ``~/.modelsdev/config.yaml``.
    """
    env_path = os.environ.get(f"{ENV_PREFIX}_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".modelsdev" / "config.yaml"


def load_from_env() -> Dict[str, Any]:
    """Collect the supported ``MODELSDEV_*`` overrides from the environment."""
    result: Dict[str, Any] = {}

    data_path = os.environ.get(f"{ENV_PREFIX}_DATA_PATH")
    if data_path:
        result["data_path"] = data_path

    canonical = os.environ.get(f"{ENV_PREFIX}_CANONICAL_PROVIDERS")
    if canonical:
        result["canonical_providers"] = canonical

    level = os.environ.get(f"{ENV_PREFIX}_LOG_LEVEL")
    if level:
        result["logging"] = {"level": level}

    return result


def load_config(config_path: Optional[str] = None) -> ModelsDevConfig:
    """Load ModelsDevConfig from file and environment.

    Args:
        config_path: Path to config file (defaults to ``default_config_path()``)

    Returns:
        Validated ModelsDevConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = Path(config_path).expanduser() if config_path else default_config_path()

    config_data = load_yaml_file(path)
    config_data = resolve_env_vars(config_data)

    # Environment overrides file values
    env_config = load_from_env()
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    try:
        config = ModelsDevConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Failed to load configuration from {path}: {e}", context={"path": str(path)}) from e

    logger.debug("Loaded configuration from %s", path)
    return config


def get_config() -> ModelsDevConfig:
    """Return the process configuration, loading it on first use."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the memoized configuration so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None
