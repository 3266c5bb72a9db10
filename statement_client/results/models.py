from dataclasses import dataclass, field
from enum import Enum

from statement_client.client.models import ParseResult
from statement_client.results.export import DownloadableFile, default_filename, serialize


class DisplayCategory(str, Enum):
    """Visual grouping for a key data point."""

    CARD = "card"
    DATE = "date"
    AMOUNT = "amount"


@dataclass(frozen=True)
class DataPoint:
    label: str
    value: str
    category: DisplayCategory
    highlight: bool = False


@dataclass(frozen=True)
class InfoItem:
    label: str
    value: str


@dataclass(frozen=True)
class TransactionRow:
    date: str
    description: str
    amount: str


@dataclass(frozen=True)
class DisplayModel:
    """Formatted, capped projection of a ParseResult for the result view.

    The export methods always work from `source`, the full result as received,
    so downloads and copies are never affected by the on-screen row cap.
    """

    source: ParseResult = field(repr=False)
    headline: str
    key_data_points: tuple[DataPoint, ...]
    additional_info: tuple[InfoItem, ...] | None
    transactions: tuple[TransactionRow, ...]
    total_transactions: int

    @property
    def remaining_transactions(self) -> int:
        return self.total_transactions - len(self.transactions)

    @property
    def truncated(self) -> bool:
        return self.remaining_transactions > 0

    def to_json(self) -> str:
        return serialize(self.source)

    def to_clipboard_text(self) -> str:
        return self.to_json()

    def to_downloadable_file(
        self,
        name: str | None = None,
        *,
        timestamp_ms: int | None = None,
    ) -> DownloadableFile:
        filename = name or default_filename(self.source, timestamp_ms)
        return DownloadableFile(filename=filename, content=self.to_json())
