import asyncio
from typing import Any

import httpx

from statement_client.client.exceptions import (
    ApiTimeoutError,
    ClientRequestError,
    NoResponseError,
    ResponseSchemaError,
    ServerRejectedError,
)
from statement_client.client.models import ParseResult
from statement_client.client.schema import validate_and_build
from statement_client.logging.logger import Log
from statement_client.upload.models import UploadCandidate

DEFAULT_TIMEOUT_SECONDS = 30.0

_Files = dict[str, tuple[str, bytes, str]]


class StatementApiClient:
    """Client for the statement parsing service.

    Stateless apart from its configuration: every call opens its own HTTP
    connection and either returns a value or raises a StatementApiError
    subclass describing why it failed.
    """

    PARSE_PATH = "/parse"
    DEBUG_PATH = "/debug"
    HEALTH_PATH = "/health"
    SUPPORTED_ISSUERS_PATH = "/supported-issuers"
    UPLOAD_FIELD = "file"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def submit(self, candidate: UploadCandidate) -> ParseResult:
        """Upload a statement PDF and return the parsed statement.

        Raises:
            ApiTimeoutError: if no answer arrives within the timeout.
            NoResponseError: on network-level failure after sending.
            ServerRejectedError: on a non-success status, with the service's
                error message when it sent one.
            ResponseSchemaError: if the success body is not a valid statement.
            ClientRequestError: if the request could not be built.
        """
        Log.info(
            f"Submitting '{candidate.name}' ({candidate.size_bytes} bytes) for parsing"
        )
        response = await self._send(
            "POST", self.PARSE_PATH, files=self._multipart(candidate)
        )
        payload = self._decode_json(response)
        result = validate_and_build(payload)
        Log.info(
            f"Parsed statement from {result.issuer_name or 'unknown issuer'}: "
            f"{len(result.transactions)} transactions"
        )
        return result

    async def debug(self, candidate: UploadCandidate) -> str:
        """Upload a PDF to the diagnostic endpoint and return its raw text."""
        Log.info(f"Requesting debug extraction for '{candidate.name}'")
        response = await self._send(
            "POST", self.DEBUG_PATH, files=self._multipart(candidate)
        )
        return response.text

    async def health(self) -> dict[str, Any]:
        """Return the service's liveness payload."""
        payload = self._decode_json(await self._send("GET", self.HEALTH_PATH))
        if not isinstance(payload, dict):
            raise ResponseSchemaError("Health response must be a JSON object")
        return payload

    async def supported_issuers(self) -> list[str]:
        """Return the issuers the service knows how to parse.

        The service answers with {"issuers": [...], "count": N}; only the list
        is returned.
        """
        payload = self._decode_json(
            await self._send("GET", self.SUPPORTED_ISSUERS_PATH)
        )
        if not isinstance(payload, dict):
            raise ResponseSchemaError("Supported issuers response must be a JSON object")
        issuers = payload.get("issuers")
        if not isinstance(issuers, list) or not all(isinstance(i, str) for i in issuers):
            raise ResponseSchemaError("'issuers' must be a list of strings")
        return issuers

    def _multipart(self, candidate: UploadCandidate) -> _Files:
        if not isinstance(candidate.content, bytes):
            raise ClientRequestError(f"Candidate '{candidate.name}' has no readable content")
        return {
            self.UPLOAD_FIELD: (candidate.name, candidate.content, candidate.media_type)
        }

    async def _send(
        self,
        method: str,
        path: str,
        *,
        files: _Files | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            response = await asyncio.wait_for(
                self._request(method, url, files), timeout=self._timeout_seconds
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            Log.error(f"{method} {url} timed out after {self._timeout_seconds}s")
            raise ApiTimeoutError(
                f"{method} {url} timed out after {self._timeout_seconds}s"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            Log.error(f"Could not build request {method} {url}: {exc}")
            raise ClientRequestError(f"Invalid request {method} {url}: {exc}") from exc
        except httpx.RequestError as exc:
            Log.error(f"No response from {method} {url}: {exc}")
            raise NoResponseError(f"No response from {method} {url}: {exc}") from exc

        if not response.is_success:
            server_message = self._extract_error_message(response)
            Log.error(
                f"{method} {url} rejected with status {response.status_code}: "
                f"{server_message or response.text[:200]}"
            )
            raise ServerRejectedError(
                f"{method} {url} returned status {response.status_code}",
                server_message=server_message,
                status_code=response.status_code,
            )
        Log.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def _request(
        self,
        method: str,
        url: str,
        files: _Files | None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self._timeout_seconds, transport=self._transport
        ) as client:
            return await client.request(method, url, files=files)

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseSchemaError(f"Response body is not valid JSON: {exc}") from exc

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            message = body.get("error")
            if isinstance(message, str) and message.strip():
                return message
        return None
