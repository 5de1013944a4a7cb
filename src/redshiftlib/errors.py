"""Exception hierarchy for redshiftlib.

Statement-level failures wrap the underlying botocore error so callers can tell
"could not reach the Data API" apart from "the Data API reported that the
statement failed". Metadata and secret listings let botocore errors through
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from redshiftlib.models.statement import ExecutionStatus


class RedshiftLibError(Exception):
    """Base class for all redshiftlib errors"""


class ConfigurationError(RedshiftLibError, ValueError):
    """Connection settings are incomplete or inconsistent"""


class _WrappedCallError(RedshiftLibError):
    """A remote call failed; the cause is kept on the instance"""

    action = "call"

    def __init__(self, cause: BaseException, statement_id: Optional[str] = None):
        self.cause = cause
        self.statement_id = statement_id
        target = f" for statement {statement_id}" if statement_id else ""
        super().__init__(f"{self.action} failed{target}: {cause}")


class ExecuteError(_WrappedCallError):
    """Submitting a statement failed"""

    action = "execute"


class StatusError(_WrappedCallError):
    """The status check itself failed (not a FAILED/ABORTED statement)"""

    action = "status check"


class StopError(_WrappedCallError):
    """Cancelling a statement failed"""

    action = "stop"


class StatementFailedError(RedshiftLibError):
    """The service reported a terminal FAILED or ABORTED state.

    The message is exactly the error text supplied by the service, and
    ``status`` holds the snapshot that was observed (``finished`` is True).
    """

    def __init__(self, status: "ExecutionStatus"):
        self.status = status
        super().__init__(status.error or "")


class MissingSecretContentError(RedshiftLibError):
    """The vault returned no string content for a secret"""

    def __init__(self, arn: str):
        self.arn = arn
        super().__init__(f"missing secret content for {arn}")


class SecretDecodeError(RedshiftLibError, ValueError):
    """Secret content is present but is not a valid credential document.

    ``reasons`` lists what was wrong without echoing the secret content.
    """

    def __init__(self, arn: str, reasons: Optional[list[str]] = None):
        self.arn = arn
        self.reasons = reasons or []
        detail = f" ({'; '.join(self.reasons)})" if self.reasons else ""
        super().__init__(f"secret {arn} does not contain valid credential JSON{detail}")


class CallAbortedError(RedshiftLibError):
    """A call context stopped the operation before it reached the service"""


class OperationCancelledError(CallAbortedError):
    """The call context was cancelled"""


class DeadlineExceededError(CallAbortedError):
    """The call context's deadline passed"""
