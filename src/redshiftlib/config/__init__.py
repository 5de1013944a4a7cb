"""Configuration module exports."""

from .config import load_profile, list_profiles, settings_from_profile
from .paths import (
    CONFIG_DIR_ENV,
    config_dir,
    example_config_path,
    get_default_config_path,
    resolve_config_path,
)

__all__ = [
    "load_profile",
    "list_profiles",
    "settings_from_profile",
    "resolve_config_path",
    "get_default_config_path",
    "config_dir",
    "example_config_path",
    "CONFIG_DIR_ENV",
]
