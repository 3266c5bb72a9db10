from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from statement_client.client.exceptions import FailureKind
from statement_client.client.models import ParseResult
from statement_client.upload.models import UploadCandidate


class WorkflowStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FailureReason:
    """User-facing failure message plus its internal classification."""

    message: str
    kind: FailureKind
    detail: str = ""


@dataclass(frozen=True)
class Idle:
    """Waiting for a file. Holds either an admissible candidate or the violations
    of the last rejected selection, never both."""

    status: ClassVar[WorkflowStatus] = WorkflowStatus.IDLE

    candidate: UploadCandidate | None = None
    violations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Submitting:
    status: ClassVar[WorkflowStatus] = WorkflowStatus.SUBMITTING

    token: int
    candidate: UploadCandidate


@dataclass(frozen=True)
class Succeeded:
    status: ClassVar[WorkflowStatus] = WorkflowStatus.SUCCEEDED

    result: ParseResult


@dataclass(frozen=True)
class Failed:
    status: ClassVar[WorkflowStatus] = WorkflowStatus.FAILED

    reason: FailureReason


WorkflowState = Idle | Submitting | Succeeded | Failed
