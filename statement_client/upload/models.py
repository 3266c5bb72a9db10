import mimetypes
from dataclasses import dataclass, field
from pathlib import Path

from statement_client.config.settings import Settings

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadCandidate:
    """A file selected by the user, held until rejection or submission."""

    name: str
    size_bytes: int
    media_type: str
    content: bytes = field(default=b"", repr=False)

    @classmethod
    def from_path(cls, path: Path) -> "UploadCandidate":
        """Read a file from disk, guessing its media type from the file name.

        Raises:
            OSError: if the file cannot be read.
        """
        content = path.read_bytes()
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size_bytes=len(content),
            media_type=media_type or _FALLBACK_MEDIA_TYPE,
            content=content,
        )


@dataclass(frozen=True)
class FileConstraints:
    """Pre-submission limits a candidate must satisfy."""

    max_size_bytes: int = 10 * 1024 * 1024
    accepted_media_types: frozenset[str] = frozenset({"application/pdf"})

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileConstraints":
        return cls(
            max_size_bytes=settings.max_upload_size_bytes,
            accepted_media_types=frozenset(settings.accepted_media_types),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of an admissibility check. Violations keep their check order."""

    is_admissible: bool
    violations: tuple[str, ...] = ()
