"""Display formatting for statement values.

Every function here is total: malformed input degrades to a default or is
echoed back, it never raises.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "₹"
ZERO_AMOUNT = f"{CURRENCY_SYMBOL}0.00"
MISSING_VALUE = "N/A"

_CENTS = Decimal("0.01")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_SIZE_BASE = 1024


def format_amount(value: object) -> str:
    """Render an amount as rupees with en-IN digit grouping and two decimals.

    >>> format_amount(123456.5)
    '₹1,23,456.50'
    """
    if value is None:
        return ZERO_AMOUNT
    try:
        amount = _to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    except (ValueError, ArithmeticError):
        return f"{CURRENCY_SYMBOL}{value}"
    return f"{CURRENCY_SYMBOL}{_group_indian(amount)}"


def format_date(value: object) -> str:
    """Render an ISO date as 'DD Mon YYYY', echoing unparsable input."""
    if value is None or value == "":
        return MISSING_VALUE
    if isinstance(value, datetime):
        return _render_date(value.date())
    if isinstance(value, date):
        return _render_date(value)
    if not isinstance(value, str):
        return str(value)
    parsed = _parse_iso_date(value.strip())
    if parsed is None:
        return value
    return _render_date(parsed)


def format_byte_size(size: object) -> str:
    """Render a byte count using the largest unit that keeps it below 1024."""
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        return "0 Bytes"
    if not size > 0 or size == float("inf"):
        return "0 Bytes"

    index = 0
    while index < len(_SIZE_UNITS) - 1 and size >= _SIZE_BASE ** (index + 1):
        index += 1
    scaled = Decimal(str(size / _SIZE_BASE**index)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{_strip_zeros(scaled)} {_SIZE_UNITS[index]}"


def truncate_text(text: str | None, max_length: int = 50) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("booleans are not amounts")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        number = Decimal(value.strip())
    else:
        raise ValueError(f"unsupported amount type {type(value).__name__}")
    if not number.is_finite():
        raise ValueError("amount must be finite")
    return number


def _group_indian(amount: Decimal) -> str:
    sign = "-" if amount < 0 else ""
    integer, _, fraction = f"{abs(amount):.2f}".partition(".")
    if len(integer) > 3:
        head, tail = integer[:-3], integer[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        integer = ",".join([*groups, tail])
    return f"{sign}{integer}.{fraction}"


def _parse_iso_date(text: str) -> date | None:
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _render_date(value: date) -> str:
    return f"{value.day:02d} {_MONTHS[value.month - 1]} {value.year}"


def _strip_zeros(value: Decimal) -> str:
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
