"""Value types shared by the primitives and the API facade"""

from .secret import ManagedSecret, ResolvedSecret
from .settings import (
    AuthMode,
    AuthParameters,
    ConnectionSettings,
    ManagedSecretAuth,
    StaticUser,
)
from .statement import ExecutionHandle, ExecutionStatus, StatementState

__all__ = [
    "AuthMode",
    "AuthParameters",
    "ConnectionSettings",
    "ManagedSecretAuth",
    "StaticUser",
    "ManagedSecret",
    "ResolvedSecret",
    "ExecutionHandle",
    "ExecutionStatus",
    "StatementState",
]
