"""Statement execution against the Redshift Data API.

Submit, poll and cancel. Each call is a single request; polling cadence and
deadlines belong to the caller.
"""

import logging
from typing import Any, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from redshiftlib.context import CallContext, check
from redshiftlib.errors import ExecuteError, StatementFailedError, StatusError, StopError
from redshiftlib.models import AuthParameters, ExecutionHandle, ExecutionStatus

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (ClientError, BotoCoreError)


class StatementExecutor:
    """Execute SQL statements asynchronously on a Redshift cluster"""

    def __init__(self, client: Any):
        """Initialize with a ``redshift-data`` client"""
        self.client = client

    def execute(
        self,
        query: str,
        auth: AuthParameters,
        ctx: Optional[CallContext] = None,
    ) -> ExecutionHandle:
        """Submit ``query`` and return its handle without waiting.

        The SQL text is passed through untouched; the service validates it.

        Raises:
            ExecuteError: If the submit request fails
        """
        check(ctx)
        try:
            response = self.client.execute_statement(**auth.as_request(), Sql=query)
        except _REMOTE_ERRORS as err:
            raise ExecuteError(err) from err

        handle = ExecutionHandle(id=response["Id"])
        logger.debug("Submitted statement %s", handle.id)
        return handle

    def status(
        self,
        handle: Union[ExecutionHandle, str],
        ctx: Optional[CallContext] = None,
    ) -> ExecutionStatus:
        """Return one snapshot of the statement's state.

        Returns:
            ExecutionStatus with ``finished`` False while the statement is in
            flight and True once it is FINISHED

        Raises:
            StatusError: If the status request itself fails
            StatementFailedError: If the service reports FAILED or ABORTED;
                the exception carries the observed status and its message is
                the service's error text

        Example:
            >>> status = executor.status(handle)
            >>> while not status.finished:
            ...     time.sleep(1)
            ...     status = executor.status(handle)
        """
        handle = ExecutionHandle.of(handle)
        check(ctx)
        try:
            response = self.client.describe_statement(Id=handle.id)
        except _REMOTE_ERRORS as err:
            raise StatusError(err, statement_id=handle.id) from err

        status = ExecutionStatus.from_state(
            handle.id, response.get("Status", ""), response.get("Error")
        )
        logger.debug("Statement %s is %s", handle.id, status.state)
        if status.error is not None:
            raise StatementFailedError(status)
        return status

    def stop(
        self,
        handle: Union[ExecutionHandle, str],
        ctx: Optional[CallContext] = None,
    ) -> None:
        """Ask the service to cancel the statement.

        Cancelling a statement that already finished is whatever the service
        says it is; its error is raised, not ignored.

        Raises:
            StopError: If the cancel request fails
        """
        handle = ExecutionHandle.of(handle)
        check(ctx)
        try:
            self.client.cancel_statement(Id=handle.id)
        except _REMOTE_ERRORS as err:
            raise StopError(err, statement_id=handle.id) from err
        logger.debug("Cancel requested for statement %s", handle.id)
