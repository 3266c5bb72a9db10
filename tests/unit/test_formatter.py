from datetime import date, datetime
from decimal import Decimal

import pytest

from statement_client.formatting.formatter import (
    format_amount,
    format_byte_size,
    format_date,
    truncate_text,
)


class TestFormatAmount:
    def test_none_is_zero(self) -> None:
        assert format_amount(None) == "₹0.00"

    def test_float(self) -> None:
        assert format_amount(4500.5) == "₹4,500.50"

    def test_numeric_string(self) -> None:
        assert format_amount("890.5") == "₹890.50"

    def test_integer(self) -> None:
        assert format_amount(500) == "₹500.00"

    def test_decimal(self) -> None:
        assert format_amount(Decimal("12.3")) == "₹12.30"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1000, "₹1,000.00"),
            (123456.5, "₹1,23,456.50"),
            (12345678.9, "₹1,23,45,678.90"),
            (999, "₹999.00"),
        ],
    )
    def test_indian_grouping(self, value: float, expected: str) -> None:
        assert format_amount(value) == expected

    def test_rounds_half_up(self) -> None:
        assert format_amount("0.005") == "₹0.01"
        assert format_amount(2.675) == "₹2.68"

    def test_negative(self) -> None:
        assert format_amount(-1500) == "₹-1,500.00"

    def test_unparsable_string_falls_back(self) -> None:
        assert format_amount("abc") == "₹abc"

    def test_not_a_number_falls_back(self) -> None:
        assert format_amount(float("nan")) == "₹nan"

    def test_unsupported_type_falls_back(self) -> None:
        assert format_amount([1, 2]) == "₹[1, 2]"


class TestFormatDate:
    def test_none(self) -> None:
        assert format_date(None) == "N/A"

    def test_empty(self) -> None:
        assert format_date("") == "N/A"

    def test_iso_date(self) -> None:
        assert format_date("2025-11-01") == "01 Nov 2025"

    def test_is_stable(self) -> None:
        first = format_date("2025-11-01")
        assert all(format_date("2025-11-01") == first for _ in range(5))

    def test_iso_datetime_with_zulu(self) -> None:
        assert format_date("2025-02-09T10:15:00Z") == "09 Feb 2025"

    def test_date_object(self) -> None:
        assert format_date(date(2024, 12, 31)) == "31 Dec 2024"

    def test_datetime_object(self) -> None:
        assert format_date(datetime(2024, 1, 5, 8, 30)) == "05 Jan 2024"

    def test_unparsable_is_echoed(self) -> None:
        assert format_date("next tuesday") == "next tuesday"

    def test_invalid_calendar_date_is_echoed(self) -> None:
        assert format_date("2025-02-30") == "2025-02-30"


class TestFormatByteSize:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 Bytes"),
            (500, "500 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1234567, "1.18 MB"),
            (10 * 1024 * 1024, "10 MB"),
            (3 * 1024**3, "3 GB"),
            (5 * 1024**4, "5120 GB"),
        ],
    )
    def test_units(self, size: int, expected: str) -> None:
        assert format_byte_size(size) == expected

    @pytest.mark.parametrize("size", [-1, None, "12", float("nan")])
    def test_invalid_degrades_to_zero(self, size: object) -> None:
        assert format_byte_size(size) == "0 Bytes"


class TestTruncateText:
    def test_short_text_unchanged(self) -> None:
        assert truncate_text("Amazon") == "Amazon"

    def test_long_text_truncated(self) -> None:
        assert truncate_text("x" * 60) == "x" * 50 + "..."

    def test_empty(self) -> None:
        assert truncate_text(None) == ""
