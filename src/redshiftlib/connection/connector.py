"""AWS session management with TOML profile support."""

import os
from pathlib import Path
from typing import Optional, Any, Dict, Union

import boto3
import keyring
from botocore.config import Config
from pydantic import SecretStr

from redshiftlib.config import load_profile, settings_from_profile
from redshiftlib import __version__
from redshiftlib.models import ConnectionSettings

# Appended to the User-Agent header of every Data API and Secrets Manager request
USER_AGENT_EXTRA = f"redshiftlib/{__version__} Redshift"


class AWSConnector:
    """
    AWS session manager for a Redshift connection profile.

    Loads a profile from connections.toml, resolves AWS credentials and builds
    the boto3 session lazily. The session is the transport provider handed to
    :class:`~redshiftlib.api.RedshiftAPI`.

    Credentials are resolved in order:
    1. ``aws_profile``: a named profile from the AWS shared config
    2. ``aws_access_key_id`` with a secret key from ``aws_secret_access_key``,
       the environment variable named by ``aws_secret_access_key_env``, or the
       OS keyring when ``use_keyring = true``
    3. Otherwise boto3's default credential chain

    Args:
        profile: Name of the profile to load from connections.toml
        path: Optional explicit path to connections.toml
        **kwargs: Override any profile value

    Example:
        >>> connector = AWSConnector(profile="dev", region="eu-west-1")
        >>> api = RedshiftAPI(connector.session(), connector.settings)
    """

    def __init__(
        self,
        profile: str,
        path: Optional[Union[str, Path]] = None,
        **kwargs: Any,
    ) -> None:
        self._cfg: Dict[str, Any] = dict(load_profile(profile, path=path))
        self._cfg.update(kwargs)
        self._profile = profile
        self.secret_access_key: Optional[SecretStr] = None
        self.session_token: Optional[SecretStr] = None
        self._session: Optional[boto3.session.Session] = None
        self._settings = settings_from_profile(self._cfg)
        self._process_auth()

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    def _process_auth(self) -> None:
        """Resolve static AWS credentials when the profile asks for them"""
        if not self._cfg.get("aws_access_key_id"):
            return

        secret = self._cfg.get("aws_secret_access_key")
        if secret:
            self.secret_access_key = SecretStr(secret)
        else:
            self.secret_access_key = self._lookup_secret_key()

        if self.secret_access_key is None:
            raise ValueError(
                "'aws_access_key_id' is set but no secret access key was found. "
                "Set 'aws_secret_access_key', 'aws_secret_access_key_env' or 'use_keyring'."
            )

        token = self._cfg.get("aws_session_token")
        if token:
            self.session_token = SecretStr(token)

    def _lookup_secret_key(self) -> Optional[SecretStr]:
        """Read the secret access key from an environment variable or the keyring"""
        env_var = self._cfg.get("aws_secret_access_key_env")
        if env_var:
            env_value = os.environ.get(env_var)
            if env_value:
                return SecretStr(env_value)

        if self._cfg.get("use_keyring", False):
            keyring_service = self._cfg.get("keyring_service", f"redshiftlib.{self._profile}")
            keyring_username = self._cfg.get("keyring_username", self._cfg["aws_access_key_id"])
            stored = keyring.get_password(keyring_service, keyring_username)
            if stored:
                return SecretStr(stored)

        return None

    def _session_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self._settings.region:
            kwargs["region_name"] = self._settings.region
        if self._cfg.get("aws_profile"):
            kwargs["profile_name"] = self._cfg["aws_profile"]
        if self.secret_access_key is not None:
            kwargs["aws_access_key_id"] = self._cfg["aws_access_key_id"]
            kwargs["aws_secret_access_key"] = self.secret_access_key.get_secret_value()
            if self.session_token is not None:
                kwargs["aws_session_token"] = self.session_token.get_secret_value()
        return kwargs

    def session(self) -> boto3.session.Session:
        """Get or create the boto3 session"""
        if self._session is None:
            self._session = boto3.session.Session(**self._session_kwargs())
        return self._session

    def client_config(self) -> Config:
        """botocore client config with the user-agent marker and socket timeouts"""
        return client_config(
            connect_timeout=self._cfg.get("connect_timeout"),
            read_timeout=self._cfg.get("read_timeout"),
        )

    def __repr__(self) -> str:
        status = "active" if self._session else "inactive"
        return f"AWSConnector(profile='{self._profile}', {status})"


def client_config(
    connect_timeout: Optional[float] = None,
    read_timeout: Optional[float] = None,
) -> Config:
    """Build the botocore config shared by the Data API and Secrets Manager clients"""
    options: Dict[str, Any] = {"user_agent_extra": USER_AGENT_EXTRA}
    if connect_timeout is not None:
        options["connect_timeout"] = connect_timeout
    if read_timeout is not None:
        options["read_timeout"] = read_timeout
    return Config(**options)
