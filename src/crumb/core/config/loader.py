"""
Configuration loading for crumb.

Implements the configuration precedence chain:
    defaults < user config file < env vars

The config file is YAML at ``$XDG_CONFIG_HOME/crumb/config.yaml``. A
missing file means defaults; a missing key means that key's default.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from crumb.core.errors import ConfigError

from .models import CrumbConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_TEMPLATE = """\
# crumb configuration

# default tool to pre-select in the dropdown
default_tool: Claude Code

# custom tools to add to the dropdown (in addition to built-in tools)
custom_tools: []

# favorite tags to suggest when tagging prompts
favorite_tags: []

# output directory for prompts (relative to current working directory)
output_dir: crumbs
"""

# Environment variable -> config key
ENV_OVERRIDES = {
    "CRUMB_DEFAULT_TOOL": "default_tool",
    "CRUMB_OUTPUT_DIR": "output_dir",
}


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """
    Get path to the user configuration file.

    Returns:
        Path to ~/.config/crumb/config.yaml (or XDG equivalent)
    """
    return get_xdg_config_home() / "crumb" / "config.yaml"


def load_yaml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a YAML config file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed mapping, or None if the file doesn't exist. An empty file
        yields an empty mapping.

    Raises:
        ConfigError: If the file can't be read, isn't valid YAML, or
            isn't a mapping
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(path, f"cannot read file: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, f"expected a mapping, got {type(data).__name__}")
    return data


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        CRUMB_DEFAULT_TOOL - overrides default_tool
        CRUMB_OUTPUT_DIR - overrides output_dir

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()
    for env_var, key in ENV_OVERRIDES.items():
        if value := os.environ.get(env_var, "").strip():
            logger.debug("%s overrides %s", env_var, key)
            result[key] = value
    return result


def load_config(path: Path | None = None) -> CrumbConfig:
    """
    Load configuration.

    Args:
        path: Config file to read (defaults to ``get_config_path()``)

    Returns:
        Validated CrumbConfig instance

    Raises:
        ConfigError: If the file exists but is unreadable or invalid

    Example:
        >>> config = load_config()
        >>> config.output_dir
        'crumbs'
    """
    config_path = path if path is not None else get_config_path()

    data = load_yaml_file(config_path)
    if data is None:
        logger.debug("No config at %s, using defaults", config_path)
        data = {}

    data = apply_env_overrides(data)

    try:
        return CrumbConfig(**data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(config_path, problems) from e


def write_default_config(path: Path) -> None:
    """
    Write the documented default config file.

    Creates parent directories as needed.

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")


def resolve_output_dir(config: CrumbConfig, cwd: Path | None = None) -> Path:
    """
    Resolve the configured output directory to an absolute path.

    Relative paths are taken from the working directory; ``~`` is expanded.
    """
    output_dir = Path(config.output_dir).expanduser()
    if output_dir.is_absolute():
        return output_dir
    base = cwd if cwd is not None else Path.cwd()
    return base / output_dir
