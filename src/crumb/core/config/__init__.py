"""
Configuration models and loading.

This module provides the Pydantic model for crumb configuration and the
YAML loader: defaults < user config file < env vars.
"""

from .loader import (
    DEFAULT_CONFIG_TEMPLATE,
    apply_env_overrides,
    get_config_path,
    get_xdg_config_home,
    load_config,
    resolve_output_dir,
    write_default_config,
)
from .models import BUILTIN_TOOLS, DEFAULT_OUTPUT_DIR, DEFAULT_TOOL, CrumbConfig, get_all_tools

__all__ = [
    # Models
    "BUILTIN_TOOLS",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_TOOL",
    "CrumbConfig",
    "get_all_tools",
    # Loader functions
    "DEFAULT_CONFIG_TEMPLATE",
    "apply_env_overrides",
    "get_config_path",
    "get_xdg_config_home",
    "load_config",
    "resolve_output_dir",
    "write_default_config",
]
