"""Where redshiftlib looks for connection profiles.

The directory is resolved on every lookup and never created: the library only
reads profiles, and callers that build ``RedshiftAPI`` from an injected
session never touch it.
"""

import os
from pathlib import Path
from typing import Optional, Union

from importlib.resources import files as importlib_files

CONFIG_DIR_ENV = "REDSHIFTLIB_CONFIG_DIR"
CONFIG_FILE_NAME = "connections.toml"


def config_dir() -> Path:
    """``$REDSHIFTLIB_CONFIG_DIR`` if set, else ``~/.redshiftlib``"""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".redshiftlib"


def example_config_path() -> Path:
    """Example profiles shipped with the package"""
    return Path(str(importlib_files("redshiftlib") / "_data" / "connections.toml.example"))


def get_default_config_path() -> Path:
    """
    Path of connections.toml in the configuration directory.

    Raises:
        FileNotFoundError: If the file does not exist; the message says where
            to put it and which keys a Redshift profile needs
    """
    config_path = config_dir() / CONFIG_FILE_NAME
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"No Redshift connection profiles at {config_path}\n\n"
        f"Copy {example_config_path()} there (or set {CONFIG_DIR_ENV} to the "
        f"directory holding your {CONFIG_FILE_NAME}) and give each profile:\n"
        f"  cluster_identifier, database\n"
        f"  db_user, or use_managed_secret = true with secret_arn\n"
        f"  optionally region, aws_profile, connect_timeout, read_timeout\n"
    )


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Use ``path`` when given, else the default profile file"""
    if path:
        return Path(path)
    return get_default_config_path()
