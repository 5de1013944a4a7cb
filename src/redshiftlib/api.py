"""Single entry point for a frontend talking to Redshift through the Data API"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from botocore.config import Config

from redshiftlib.connection import AWSConnector, client_config
from redshiftlib.context import CallContext
from redshiftlib.errors import ConfigurationError
from redshiftlib.models import (
    AuthParameters,
    ConnectionSettings,
    ExecutionHandle,
    ExecutionStatus,
    ManagedSecret,
    ResolvedSecret,
)
from redshiftlib.primitives import MetadataExplorer, SecretsResolver, StatementExecutor

logger = logging.getLogger(__name__)

Options = dict[str, str]
Handle = Union[ExecutionHandle, str]


class RedshiftAPI:
    """Execute statements, browse the catalog and find credentials for one cluster.

    The API keeps no statement state of its own; the Data API is the source of
    truth and a handle is all that is needed to poll or cancel later. Every
    operation accepts an optional :class:`~redshiftlib.context.CallContext`.

    Example:
        >>> api = RedshiftAPI.from_profile("dev")
        >>> handle = api.execute("SELECT 1")
        >>> status = api.status(handle)
        >>> status.finished
        False
        >>> api.tables({"schema": "sales"})
        ['orders', 'customers']
    """

    def __init__(
        self,
        session: Any,
        settings: ConnectionSettings,
        config: Optional[Config] = None,
    ):
        """Create the Data API and Secrets Manager clients.

        Args:
            session: Transport provider, usually a ``boto3.session.Session``;
                anything with ``client(service_name, config=...)`` works
            settings: Validated connection settings, not modified afterwards
            config: botocore client config; defaults to one carrying the
                redshiftlib user-agent marker

        Raises:
            ConfigurationError: If ``settings`` is not a ConnectionSettings
        """
        if not isinstance(settings, ConnectionSettings):
            raise ConfigurationError(
                f"RedshiftAPI requires ConnectionSettings, got {type(settings).__name__}"
            )
        self._settings = settings
        config = config or client_config()
        self.client = session.client("redshift-data", config=config)
        self.secrets_client = session.client("secretsmanager", config=config)

        self._executor = StatementExecutor(self.client)
        self._metadata = MetadataExplorer(self.client)
        self._secrets = SecretsResolver(self.secrets_client)
        logger.debug("Created %r", self)

    @classmethod
    def from_profile(
        cls,
        profile: str,
        path: Optional[Union[str, Path]] = None,
        **overrides: Any,
    ) -> "RedshiftAPI":
        """Build an API from a connections.toml profile"""
        connector = AWSConnector(profile, path=path, **overrides)
        return cls(connector.session(), connector.settings, config=connector.client_config())

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    def build_auth_parameters(self) -> AuthParameters:
        """Common request fields derived from the settings; recomputed per call"""
        return self._settings.auth_parameters()

    # Statements

    def execute(self, query: str, ctx: Optional[CallContext] = None) -> ExecutionHandle:
        """Submit ``query`` and return its handle"""
        return self._executor.execute(query, self.build_auth_parameters(), ctx=ctx)

    def status(self, handle: Handle, ctx: Optional[CallContext] = None) -> ExecutionStatus:
        """Poll once; raises StatementFailedError for FAILED/ABORTED statements"""
        return self._executor.status(handle, ctx=ctx)

    def stop(self, handle: Handle, ctx: Optional[CallContext] = None) -> None:
        """Request cancellation of a statement"""
        self._executor.stop(handle, ctx=ctx)

    # Catalog

    def schemas(self, options: Optional[Options] = None, ctx: Optional[CallContext] = None) -> list[str]:
        return self._metadata.schemas(self.build_auth_parameters(), ctx=ctx)

    def tables(self, options: Optional[Options] = None, ctx: Optional[CallContext] = None) -> list[str]:
        """Tables in ``options["schema"]``, or in ``public`` when no schema is given"""
        schema = (options or {}).get("schema", "")
        return self._metadata.tables(self.build_auth_parameters(), schema, ctx=ctx)

    def columns(self, options: Options, ctx: Optional[CallContext] = None) -> list[str]:
        """Column names for ``options["schema"]`` and ``options["table"]``"""
        schema, table = options.get("schema", ""), options.get("table", "")
        return self._metadata.columns(self.build_auth_parameters(), schema, table, ctx=ctx)

    def databases(self, options: Optional[Options] = None, ctx: Optional[CallContext] = None) -> list[str]:
        return self._metadata.databases(ctx=ctx)

    def regions(self, ctx: Optional[CallContext] = None) -> list[str]:
        return self._metadata.regions(ctx=ctx)

    # Credentials

    def secrets(self, ctx: Optional[CallContext] = None) -> list[ManagedSecret]:
        """Secrets tagged for Redshift use"""
        return self._secrets.secrets(ctx=ctx)

    def secret(self, options: Options, ctx: Optional[CallContext] = None) -> ResolvedSecret:
        """Credential content of ``options["secretARN"]``"""
        return self._secrets.secret(options.get("secretARN", ""), ctx=ctx)

    def __repr__(self) -> str:
        return f"RedshiftAPI({self._settings!r})"
