from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    """A single statement line as returned by the parsing service."""

    transaction_date: str | None = None
    posting_date: str | None = None
    description: str | None = None
    merchant_name: str | None = None
    amount: float | None = None
    type: str | None = None  # DEBIT, CREDIT, FEE, ...


@dataclass(frozen=True)
class ParseResult:
    """Normalized statement received from the parse endpoint.

    Every field may be absent; the backend omits what it could not extract.
    Dates stay in the ISO form the backend sends them in.
    """

    issuer_name: str | None = None
    card_holder_name: str | None = None
    card_last_four_digits: str | None = None
    card_variant: str | None = None
    statement_date: str | None = None
    payment_due_date: str | None = None
    total_amount_due: float | None = None
    credit_limit: float | None = None
    available_credit: float | None = None
    minimum_amount_due: float | None = None
    transactions: tuple[Transaction, ...] = ()
