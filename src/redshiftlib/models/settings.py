"""Connection settings and the per-call authentication parameters derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from redshiftlib.errors import ConfigurationError
from .secret import ManagedSecret


@dataclass(frozen=True)
class StaticUser:
    """Authenticate as a database user with temporary cluster credentials"""

    db_user: str


@dataclass(frozen=True)
class ManagedSecretAuth:
    """Authenticate with a Secrets Manager secret"""

    secret: ManagedSecret


AuthMode = Union[StaticUser, ManagedSecretAuth]


@dataclass(frozen=True)
class AuthParameters:
    """Common request fields for every Data API call.

    Exactly one of ``db_user`` and ``secret_arn`` is set.
    """

    cluster_identifier: str
    database: str
    db_user: Optional[str] = None
    secret_arn: Optional[str] = None

    def as_request(self) -> dict[str, str]:
        """Request fields using the Data API's wire names"""
        request = {
            "ClusterIdentifier": self.cluster_identifier,
            "Database": self.database,
        }
        if self.secret_arn is not None:
            request["SecretArn"] = self.secret_arn
        else:
            request["DbUser"] = self.db_user or ""
        return request


@dataclass(frozen=True)
class ConnectionSettings:
    """How to reach one cluster/database and how to authenticate against it.

    Immutable for the lifetime of a :class:`~redshiftlib.api.RedshiftAPI`.

    Example:
        >>> settings = ConnectionSettings.create(
        ...     cluster_identifier="analytics",
        ...     database="dev",
        ...     use_managed_secret=False,
        ...     db_user="awsuser",
        ... )
        >>> settings.auth_parameters().as_request()
        {'ClusterIdentifier': 'analytics', 'Database': 'dev', 'DbUser': 'awsuser'}
    """

    cluster_identifier: str
    database: str
    auth: AuthMode
    region: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.cluster_identifier:
            raise ConfigurationError("cluster_identifier is required")
        if not self.database:
            raise ConfigurationError("database is required")
        if isinstance(self.auth, StaticUser):
            if not self.auth.db_user:
                raise ConfigurationError("db_user is required when not using a managed secret")
        elif isinstance(self.auth, ManagedSecretAuth):
            if not self.auth.secret.arn:
                raise ConfigurationError("a managed secret ARN is required when use_managed_secret is set")
        else:
            raise ConfigurationError(f"Unsupported auth mode: {self.auth!r}")

    @classmethod
    def create(
        cls,
        cluster_identifier: str,
        database: str,
        use_managed_secret: bool = False,
        db_user: str = "",
        managed_secret: Optional[Union[ManagedSecret, dict[str, Any]]] = None,
        region: Optional[str] = None,
    ) -> "ConnectionSettings":
        """Build settings from the flag-based shape used in saved configuration.

        Args:
            cluster_identifier: Redshift cluster identifier
            database: Database name
            use_managed_secret: Select the managed secret instead of ``db_user``
            db_user: Database user, used only when ``use_managed_secret`` is False
            managed_secret: ``ManagedSecret`` or ``{"arn": ..., "name": ...}``,
                used only when ``use_managed_secret`` is True
            region: AWS region for the session (optional)

        Raises:
            ConfigurationError: If the selected mode is missing its value
        """
        auth: AuthMode
        if use_managed_secret:
            if managed_secret is None:
                raise ConfigurationError("a managed secret is required when use_managed_secret is set")
            if isinstance(managed_secret, dict):
                managed_secret = ManagedSecret(
                    arn=managed_secret.get("arn", ""),
                    name=managed_secret.get("name", ""),
                )
            auth = ManagedSecretAuth(secret=managed_secret)
        else:
            auth = StaticUser(db_user=db_user)
        return cls(
            cluster_identifier=cluster_identifier,
            database=database,
            auth=auth,
            region=region,
        )

    @property
    def use_managed_secret(self) -> bool:
        return isinstance(self.auth, ManagedSecretAuth)

    @property
    def db_user(self) -> str:
        return self.auth.db_user if isinstance(self.auth, StaticUser) else ""

    @property
    def managed_secret(self) -> Optional[ManagedSecret]:
        return self.auth.secret if isinstance(self.auth, ManagedSecretAuth) else None

    def auth_parameters(self) -> AuthParameters:
        """Derive the common request fields; pure, no I/O"""
        if isinstance(self.auth, ManagedSecretAuth):
            return AuthParameters(
                cluster_identifier=self.cluster_identifier,
                database=self.database,
                secret_arn=self.auth.secret.arn,
            )
        return AuthParameters(
            cluster_identifier=self.cluster_identifier,
            database=self.database,
            db_user=self.auth.db_user,
        )

    def __repr__(self) -> str:
        mode = "managed_secret" if self.use_managed_secret else "db_user"
        return (
            f"ConnectionSettings(cluster_identifier='{self.cluster_identifier}', "
            f"database='{self.database}', auth={mode})"
        )
