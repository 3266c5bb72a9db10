from enum import Enum


class FailureKind(str, Enum):
    """Internal classification of a failed submission."""

    TIMEOUT = "timeout"
    NO_RESPONSE = "no_response"
    SERVER_REJECTED = "server_rejected"
    CLIENT_ERROR = "client_error"


class StatementApiError(Exception):
    """Base exception for all parsing-service call failures."""

    kind: FailureKind = FailureKind.CLIENT_ERROR

    def __init__(self, detail: str, *, server_message: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.server_message = server_message


class ApiTimeoutError(StatementApiError):
    """Raised when the service does not answer within the request timeout."""

    kind = FailureKind.TIMEOUT


class NoResponseError(StatementApiError):
    """Raised when the request was sent but no response arrived."""

    kind = FailureKind.NO_RESPONSE


class ServerRejectedError(StatementApiError):
    """Raised when the service answered with a non-success status."""

    kind = FailureKind.SERVER_REJECTED

    def __init__(
        self,
        detail: str,
        *,
        server_message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(detail, server_message=server_message)
        self.status_code = status_code


class ResponseSchemaError(ServerRejectedError):
    """Raised when a success response does not match the statement schema."""


class ClientRequestError(StatementApiError):
    """Raised when the request could not be built or sent."""

    kind = FailureKind.CLIENT_ERROR
