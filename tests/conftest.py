import io
from collections.abc import Callable
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from statement_client.client.models import ParseResult
from statement_client.client.schema import validate_and_build
from statement_client.upload.models import UploadCandidate


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page statement-like PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "HDFC Bank Credit Card Statement")
    c.drawString(72, 700, "Card No: XXXX XXXX XXXX 1234")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_candidate(sample_pdf_bytes: bytes) -> UploadCandidate:
    return UploadCandidate(
        name="statement.pdf",
        size_bytes=len(sample_pdf_bytes),
        media_type="application/pdf",
        content=sample_pdf_bytes,
    )


def _make_transactions(count: int) -> list[dict[str, Any]]:
    return [
        {
            "transactionDate": f"2025-10-{(i % 28) + 1:02d}",
            "postingDate": None,
            "description": f"Purchase {i}",
            "merchantName": None,
            "amount": 100.0 + i,
            "type": "DEBIT",
        }
        for i in range(count)
    ]


@pytest.fixture()
def make_transactions() -> Callable[[int], list[dict[str, Any]]]:
    """Factory for n distinct DEBIT transactions in wire shape."""
    return _make_transactions


@pytest.fixture()
def statement_payload() -> dict[str, Any]:
    """A complete parse response as the service sends it."""
    return {
        "issuerName": "HDFC Bank",
        "cardHolderName": "A Customer",
        "cardLastFourDigits": "1234",
        "cardVariant": "Regalia",
        "statementDate": "2025-10-14",
        "paymentDueDate": "2025-11-01",
        "totalAmountDue": 4500.5,
        "creditLimit": 200000.0,
        "availableCredit": 195499.5,
        "minimumAmountDue": 500.0,
        "transactions": [
            {
                "transactionDate": "2025-10-10",
                "postingDate": "2025-10-11",
                "description": "Amazon.in Purchase",
                "merchantName": "Amazon",
                "amount": 1250.0,
                "type": "DEBIT",
            },
            {
                "transactionDate": "2025-10-05",
                "postingDate": None,
                "description": None,
                "merchantName": "Grocery Store",
                "amount": 890.5,
                "type": "DEBIT",
            },
            {
                "transactionDate": "2025-09-25",
                "postingDate": None,
                "description": "Credit Card Payment",
                "merchantName": None,
                "amount": -5000.0,
                "type": "CREDIT",
            },
        ],
    }


@pytest.fixture()
def parse_result(statement_payload: dict[str, Any]) -> ParseResult:
    return validate_and_build(statement_payload)
