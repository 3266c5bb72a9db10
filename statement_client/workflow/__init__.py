from statement_client.workflow.controller import WorkflowController
from statement_client.workflow.notifier import BaseNotifier, LogNotifier
from statement_client.workflow.states import WorkflowStatus

__all__ = ["BaseNotifier", "LogNotifier", "WorkflowController", "WorkflowStatus"]
