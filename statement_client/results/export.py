import json
import re
import time
from dataclasses import dataclass
from pathlib import Path

from statement_client.client.models import ParseResult
from statement_client.client.schema import to_payload
from statement_client.logging.logger import Log

JSON_MEDIA_TYPE = "application/json"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class DownloadableFile:
    """An export artifact ready to be offered for download or written to disk."""

    filename: str
    content: str
    media_type: str = JSON_MEDIA_TYPE

    def save(self, directory: Path) -> Path:
        """Write the file into directory, creating it if needed.

        Raises:
            OSError: if the file cannot be written.
        """
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_text(self.content, encoding="utf-8")
        Log.info(f"Saved statement export to {path}")
        return path


def serialize(result: ParseResult) -> str:
    """Pretty-print the full statement in the service's JSON shape."""
    return json.dumps(to_payload(result), indent=2, ensure_ascii=False)


def default_filename(result: ParseResult, timestamp_ms: int | None = None) -> str:
    """Build 'statement-{issuer}-{epoch millis}.json'."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    issuer = _UNSAFE_FILENAME_CHARS.sub("-", result.issuer_name or "").strip("-")
    return f"statement-{issuer or 'unknown'}-{timestamp_ms}.json"
