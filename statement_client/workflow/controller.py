import asyncio
import itertools

from statement_client.client.api_client import StatementApiClient
from statement_client.client.exceptions import FailureKind, StatementApiError
from statement_client.client.models import ParseResult
from statement_client.logging.logger import Log
from statement_client.results.models import DisplayModel
from statement_client.results.projector import project
from statement_client.upload.models import FileConstraints, UploadCandidate, ValidationResult
from statement_client.upload.validator import validate
from statement_client.workflow.notifier import BaseNotifier, LogNotifier
from statement_client.workflow.states import (
    Failed,
    FailureReason,
    Idle,
    Submitting,
    Succeeded,
    WorkflowState,
    WorkflowStatus,
)

GENERIC_FAILURE_MESSAGE = "Failed to parse statement"
SUCCESS_MESSAGE = "Statement parsed successfully!"


class WorkflowController:
    """State machine for the upload -> submit -> result workflow.

    Idle -> Submitting -> Succeeded | Failed, and back to Idle on reset.
    Each submission runs as an episode tagged with a token held in the
    Submitting state; a resolution is applied only while that exact episode
    is still current, so a response arriving after a reset is dropped.
    """

    def __init__(
        self,
        api_client: StatementApiClient,
        constraints: FileConstraints,
        notifier: BaseNotifier | None = None,
    ) -> None:
        self._api_client = api_client
        self._constraints = constraints
        self._notifier = notifier or LogNotifier()
        self._tokens = itertools.count(1)
        self._state: WorkflowState = Idle()

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def status(self) -> WorkflowStatus:
        return self._state.status

    @property
    def candidate(self) -> UploadCandidate | None:
        if isinstance(self._state, (Idle, Submitting)):
            return self._state.candidate
        return None

    @property
    def violations(self) -> tuple[str, ...]:
        if isinstance(self._state, Idle):
            return self._state.violations
        return ()

    @property
    def result(self) -> ParseResult | None:
        if isinstance(self._state, Succeeded):
            return self._state.result
        return None

    @property
    def failure(self) -> FailureReason | None:
        if isinstance(self._state, Failed):
            return self._state.reason
        return None

    @property
    def display_model(self) -> DisplayModel | None:
        result = self.result
        return project(result) if result is not None else None

    def select_file(self, candidate: UploadCandidate | None) -> ValidationResult | None:
        """Validate a newly selected file, replacing any previous selection.

        Returns None when the selection is ignored because the workflow is
        not idle.
        """
        if not isinstance(self._state, Idle):
            Log.warning(f"File selection ignored while {self.status.value}")
            return None

        validation = validate(candidate, self._constraints)
        if validation.is_admissible and candidate is not None:
            self._state = Idle(candidate=candidate)
            Log.info(f"Selected '{candidate.name}' for upload")
        else:
            self._state = Idle(violations=validation.violations)
            Log.warning(f"File rejected: {'; '.join(validation.violations)}")
        return validation

    def clear_file(self) -> None:
        """Drop the held candidate and any violations."""
        if isinstance(self._state, Idle):
            self._state = Idle()

    async def submit(self) -> WorkflowStatus | None:
        """Submit the held candidate and wait for the episode to resolve.

        Ignored (returns None) unless idle with an admissible candidate held.
        Returns the status once the call resolves, which is IDLE or a later
        episode's status if the workflow was reset in the meantime.
        """
        state = self._state
        if not isinstance(state, Idle):
            Log.warning(f"Submit ignored while {self.status.value}")
            return None
        if state.candidate is None:
            Log.warning("Submit ignored: no file held")
            return None

        token = next(self._tokens)
        candidate = state.candidate
        self._state = Submitting(token=token, candidate=candidate)
        Log.info(f"Episode {token}: submitting '{candidate.name}'")

        try:
            result = await self._api_client.submit(candidate)
        except StatementApiError as exc:
            reason = self._failure_reason(exc)
            if self._resolve(token, Failed(reason)):
                Log.error(f"Episode {token} failed ({reason.kind.value}): {reason.detail}")
                self._notifier.failure(reason.message)
        except Exception as exc:
            reason = FailureReason(
                message=GENERIC_FAILURE_MESSAGE,
                kind=FailureKind.CLIENT_ERROR,
                detail=str(exc),
            )
            if self._resolve(token, Failed(reason)):
                Log.exception(f"Episode {token} failed unexpectedly: {exc}")
                self._notifier.failure(reason.message)
        except asyncio.CancelledError:
            if self._is_current(token):
                self._state = Idle(candidate=candidate)
                Log.warning(f"Episode {token} cancelled, back to idle")
            raise
        else:
            if self._resolve(token, Succeeded(result)):
                Log.info(f"Episode {token} succeeded")
                self._notifier.success(SUCCESS_MESSAGE)
        return self.status

    def reset_to_idle(self) -> None:
        """Start over: clear candidate, result, failure and violations.

        An in-flight episode is invalidated; its outcome will be discarded.
        """
        if isinstance(self._state, Submitting):
            Log.info(f"Episode {self._state.token} invalidated by reset")
        self._state = Idle()
        Log.info("Workflow reset to idle")

    def _is_current(self, token: int) -> bool:
        return isinstance(self._state, Submitting) and self._state.token == token

    def _resolve(self, token: int, outcome: Succeeded | Failed) -> bool:
        if not self._is_current(token):
            Log.warning(
                f"Discarding stale {outcome.status.value} outcome of episode {token}"
            )
            return False
        self._state = outcome
        return True

    @staticmethod
    def _failure_reason(exc: StatementApiError) -> FailureReason:
        return FailureReason(
            message=exc.server_message or GENERIC_FAILURE_MESSAGE,
            kind=exc.kind,
            detail=exc.detail,
        )
