from collections.abc import Callable

from statement_client.client.models import ParseResult, Transaction
from statement_client.formatting.formatter import MISSING_VALUE, format_amount, format_date
from statement_client.logging.logger import Log
from statement_client.results.models import (
    DataPoint,
    DisplayCategory,
    DisplayModel,
    InfoItem,
    TransactionRow,
)

MAX_TRANSACTION_ROWS = 10


def project(result: ParseResult) -> DisplayModel:
    """Derive the display model shown for a successfully parsed statement."""
    rows = tuple(
        _transaction_row(t) for t in result.transactions[:MAX_TRANSACTION_ROWS]
    )
    return DisplayModel(
        source=result,
        headline=f"Extracted data from {result.issuer_name or 'your'} credit card statement",
        key_data_points=_key_data_points(result),
        additional_info=_additional_info(result),
        transactions=rows,
        total_transactions=len(result.transactions),
    )


def _key_data_points(result: ParseResult) -> tuple[DataPoint, ...]:
    card_number = (
        f"•••• {result.card_last_four_digits}"
        if result.card_last_four_digits
        else MISSING_VALUE
    )
    return (
        DataPoint("Card Number", card_number, DisplayCategory.CARD),
        DataPoint("Card Type", result.card_variant or MISSING_VALUE, DisplayCategory.CARD),
        DataPoint(
            "Statement Date",
            _safe_format(format_date, result.statement_date),
            DisplayCategory.DATE,
        ),
        DataPoint(
            "Payment Due Date",
            _safe_format(format_date, result.payment_due_date),
            DisplayCategory.DATE,
        ),
        DataPoint(
            "Total Amount Due",
            _safe_format(format_amount, result.total_amount_due),
            DisplayCategory.AMOUNT,
            highlight=True,
        ),
    )


def _additional_info(result: ParseResult) -> tuple[InfoItem, ...] | None:
    values = (
        ("Credit Limit", result.credit_limit),
        ("Available Credit", result.available_credit),
        ("Minimum Payment", result.minimum_amount_due),
    )
    if all(value is None for _, value in values):
        return None
    return tuple(InfoItem(label, _safe_format(format_amount, value)) for label, value in values)


def _transaction_row(transaction: Transaction) -> TransactionRow:
    return TransactionRow(
        date=_safe_format(format_date, transaction.transaction_date),
        description=transaction.description or transaction.merchant_name or MISSING_VALUE,
        amount=_safe_format(format_amount, transaction.amount),
    )


def _safe_format(formatter: Callable[[object], str], value: object) -> str:
    try:
        return formatter(value)
    except Exception as exc:
        Log.warning(f"Could not format value {value!r}: {exc}")
        return MISSING_VALUE
