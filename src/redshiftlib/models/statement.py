"""Statement handles and status snapshots.

The Data API is authoritative for execution state; these types only describe
what a single poll observed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class StatementState(str, Enum):
    """Lifecycle of a statement on the service side.

    STARTED -> SUBMITTED -> PICKED -> RUNNING -> FINISHED | FAILED | ABORTED
    """

    STARTED = "STARTED"
    SUBMITTED = "SUBMITTED"
    PICKED = "PICKED"
    RUNNING = "RUNNING"
    FINISHED = "FINISHED"
    FAILED = "FAILED"
    ABORTED = "ABORTED"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["StatementState"]:
        """Return the matching state, or None for a value the service added later"""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL

    @property
    def is_failure(self) -> bool:
        return self in (StatementState.FAILED, StatementState.ABORTED)


_TERMINAL = frozenset({StatementState.FINISHED, StatementState.FAILED, StatementState.ABORTED})


@dataclass(frozen=True)
class ExecutionHandle:
    """Opaque statement id returned by a submit; the only input to poll or cancel"""

    id: str

    @classmethod
    def of(cls, handle: Union["ExecutionHandle", str]) -> "ExecutionHandle":
        if isinstance(handle, ExecutionHandle):
            return handle
        return cls(id=handle)


@dataclass(frozen=True)
class ExecutionStatus:
    """One observation of a statement's state.

    Attributes:
        id: Statement id
        state: State string as reported by the service
        finished: True iff state is FINISHED, FAILED or ABORTED
        error: Service error text for FAILED/ABORTED, else None
    """

    id: str
    state: str
    finished: bool
    error: Optional[str] = None

    @classmethod
    def from_state(cls, statement_id: str, state: str, error: Optional[str] = None) -> "ExecutionStatus":
        parsed = StatementState.parse(state)
        finished = parsed is not None and parsed.is_terminal
        failed = parsed is not None and parsed.is_failure
        return cls(
            id=statement_id,
            state=state,
            finished=finished,
            error=(error or "") if failed else None,
        )
