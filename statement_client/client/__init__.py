from statement_client.client.api_client import StatementApiClient
from statement_client.client.factory import ApiClientFactory
from statement_client.client.models import ParseResult, Transaction

__all__ = ["ApiClientFactory", "ParseResult", "StatementApiClient", "Transaction"]
