"""Maps the parse endpoint's JSON payload to and from ParseResult.

The backend payload is loosely typed, so it is checked field by field on
receipt. Anything that does not fit the schema is rejected instead of being
rendered as an empty value.
"""

import math
from typing import Any

from statement_client.client.exceptions import ResponseSchemaError
from statement_client.client.models import ParseResult, Transaction

_TEXT_FIELDS = {
    "issuer_name": "issuerName",
    "card_holder_name": "cardHolderName",
    "card_last_four_digits": "cardLastFourDigits",
    "card_variant": "cardVariant",
    "statement_date": "statementDate",
    "payment_due_date": "paymentDueDate",
}
_AMOUNT_FIELDS = {
    "total_amount_due": "totalAmountDue",
    "credit_limit": "creditLimit",
    "available_credit": "availableCredit",
    "minimum_amount_due": "minimumAmountDue",
}
_TRANSACTION_TEXT_FIELDS = {
    "posting_date": "postingDate",
    "description": "description",
    "merchant_name": "merchantName",
    "type": "type",
}


def validate_and_build(data: Any) -> ParseResult:
    """Validate a decoded parse response and build a ParseResult.

    Raises:
        ResponseSchemaError: on any schema mismatch.
    """
    if not isinstance(data, dict):
        raise ResponseSchemaError("Parse response must be a JSON object")

    text_values = {
        attr: _optional_text(data.get(key), key) for attr, key in _TEXT_FIELDS.items()
    }
    amount_values = {
        attr: _optional_amount(data.get(key), key) for attr, key in _AMOUNT_FIELDS.items()
    }
    transactions = _build_transactions(data.get("transactions"))
    return ParseResult(**text_values, **amount_values, transactions=transactions)


def to_payload(result: ParseResult) -> dict[str, Any]:
    """Serialize a ParseResult back into the backend's camelCase shape."""
    payload: dict[str, Any] = {}
    for attr, key in _TEXT_FIELDS.items():
        payload[key] = getattr(result, attr)
    for attr, key in _AMOUNT_FIELDS.items():
        payload[key] = getattr(result, attr)
    payload["transactions"] = [_transaction_payload(t) for t in result.transactions]
    return payload


def _transaction_payload(transaction: Transaction) -> dict[str, Any]:
    payload: dict[str, Any] = {"transactionDate": transaction.transaction_date}
    for attr, key in _TRANSACTION_TEXT_FIELDS.items():
        payload[key] = getattr(transaction, attr)
    payload["amount"] = transaction.amount
    return payload


def _build_transactions(raw: Any) -> tuple[Transaction, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ResponseSchemaError("'transactions' must be a list")
    return tuple(_build_transaction(item, i) for i, item in enumerate(raw))


def _build_transaction(raw: Any, index: int) -> Transaction:
    if not isinstance(raw, dict):
        raise ResponseSchemaError(f"Transaction at index {index} must be an object")
    prefix = f"transactions[{index}]"
    # Older backends send 'date' instead of 'transactionDate'.
    date_key = "transactionDate" if raw.get("transactionDate") is not None else "date"
    text_values = {
        attr: _optional_text(raw.get(key), f"{prefix}.{key}")
        for attr, key in _TRANSACTION_TEXT_FIELDS.items()
    }
    return Transaction(
        transaction_date=_optional_text(raw.get(date_key), f"{prefix}.{date_key}"),
        amount=_optional_amount(raw.get("amount"), f"{prefix}.amount"),
        **text_values,
    )


def _optional_text(raw: Any, field: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ResponseSchemaError(f"'{field}' must be a string or null")
    return raw


def _optional_amount(raw: Any, field: str) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ResponseSchemaError(f"'{field}' must be a number or null")
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip().replace(",", ""))
        except ValueError as exc:
            raise ResponseSchemaError(
                f"'{field}' must be a number or numeric string, got {raw!r}"
            ) from exc
    else:
        raise ResponseSchemaError(f"'{field}' must be a number or null")
    if not math.isfinite(value):
        raise ResponseSchemaError(f"'{field}' must be a finite number")
    return value
