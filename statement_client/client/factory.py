from statement_client.client.api_client import StatementApiClient
from statement_client.config.settings import Settings


class ApiClientFactory:
    """Creates the parsing-service client from application settings."""

    @classmethod
    def create(cls, settings: Settings) -> StatementApiClient:
        base_url = settings.api_base_url.strip()
        if not base_url:
            raise ValueError("api_base_url is required to reach the parsing service")
        return StatementApiClient(
            base_url=base_url,
            timeout_seconds=settings.api_timeout_seconds,
        )
