"""Redshift connection profiles: reading connections.toml and turning a
profile into ConnectionSettings."""

import sys
import warnings
from pathlib import Path
from typing import Dict, Union, Optional, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from redshiftlib.models import ConnectionSettings, ManagedSecret

from .paths import resolve_config_path

PathLike = Optional[Union[str, Path]]


def _read_profiles(path: PathLike) -> tuple[Path, Dict[str, Dict[str, Any]]]:
    config_file = resolve_config_path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Redshift profile file not found: {config_file}")
    with open(config_file, "rb") as f:
        return config_file, tomllib.load(f)


def list_profiles(path: PathLike = None) -> list[str]:
    """Profile names in file order; empty when the file is missing"""
    try:
        _, profiles = _read_profiles(path)
    except FileNotFoundError:
        return []
    return list(profiles)


def load_profile(profile: str, path: PathLike = None) -> Dict[str, Any]:
    """
    Raw key/value table of one profile.

    Raises:
        FileNotFoundError: If there is no profile file
        KeyError: If ``profile`` is not in it
    """
    config_file, profiles = _read_profiles(path)
    if profile not in profiles:
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. "
            f"Available profiles: {', '.join(profiles)}"
        )
    return profiles[profile]


def settings_from_profile(cfg: Dict[str, Any]) -> ConnectionSettings:
    """
    Build ConnectionSettings from a loaded profile.

    Recognised keys: cluster_identifier, database, use_managed_secret,
    db_user, secret_arn, secret_name, region. When use_managed_secret is not
    given, it is inferred from the presence of secret_arn.

    Example:
        >>> settings = settings_from_profile(load_profile("analytics"))
        >>> settings.use_managed_secret
        True

    Raises:
        ConfigurationError: If the profile does not describe a usable connection
    """
    secret_arn = cfg.get("secret_arn", "")
    db_user = cfg.get("db_user", "")
    use_managed_secret = bool(cfg.get("use_managed_secret", bool(secret_arn)))

    if secret_arn and db_user:
        ignored = "db_user" if use_managed_secret else "secret_arn"
        msg = (
            f"Profile sets both 'db_user' and 'secret_arn'; "
            f"'{ignored}' is ignored because use_managed_secret={use_managed_secret}"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)

    managed_secret = None
    if use_managed_secret:
        managed_secret = ManagedSecret(arn=secret_arn, name=cfg.get("secret_name", ""))

    return ConnectionSettings.create(
        cluster_identifier=cfg.get("cluster_identifier", ""),
        database=cfg.get("database", ""),
        use_managed_secret=use_managed_secret,
        db_user=db_user,
        managed_secret=managed_secret,
        region=cfg.get("region"),
    )
