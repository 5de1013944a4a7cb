"""
redshiftlib - Redshift Data API and Secrets Manager utilities

Code is organized in layers
- config/ and connection/ as the interface for profiles and boto3 sessions
- primitives/ wraps Data API and Secrets Manager calls in small components
- api.RedshiftAPI composes them behind a single client
"""

# Read by connection/ at import time for the user-agent marker
__version__ = "0.1.0"

# Layer 1: Core connectivity
from redshiftlib.config import load_profile, list_profiles, settings_from_profile
from redshiftlib.connection import AWSConnector
from redshiftlib.context import CallContext

# Layer 2: Primitives
from redshiftlib.primitives import (
    StatementExecutor,
    MetadataExplorer,
    SecretsResolver,
    iter_pages,
)

# Layer 3: Facade
from redshiftlib.api import RedshiftAPI

from redshiftlib.models import (
    ConnectionSettings,
    StaticUser,
    ManagedSecretAuth,
    AuthParameters,
    ManagedSecret,
    ResolvedSecret,
    ExecutionHandle,
    ExecutionStatus,
    StatementState,
)

from redshiftlib.errors import (
    RedshiftLibError,
    ConfigurationError,
    ExecuteError,
    StatusError,
    StopError,
    StatementFailedError,
    MissingSecretContentError,
    SecretDecodeError,
    CallAbortedError,
    OperationCancelledError,
    DeadlineExceededError,
)

__all__ = [
    # Layer 1: Configuration & Connection
    "load_profile",
    "list_profiles",
    "settings_from_profile",
    "AWSConnector",
    "CallContext",
    # Layer 2: Primitives
    "StatementExecutor",
    "MetadataExplorer",
    "SecretsResolver",
    "iter_pages",
    # Layer 3: Facade
    "RedshiftAPI",
    # Models
    "ConnectionSettings",
    "StaticUser",
    "ManagedSecretAuth",
    "AuthParameters",
    "ManagedSecret",
    "ResolvedSecret",
    "ExecutionHandle",
    "ExecutionStatus",
    "StatementState",
    # Errors
    "RedshiftLibError",
    "ConfigurationError",
    "ExecuteError",
    "StatusError",
    "StopError",
    "StatementFailedError",
    "MissingSecretContentError",
    "SecretDecodeError",
    "CallAbortedError",
    "OperationCancelledError",
    "DeadlineExceededError",
]
