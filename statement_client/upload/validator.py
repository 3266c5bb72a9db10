"""Admissibility checks run on a file before it is submitted."""

from statement_client.upload.models import FileConstraints, UploadCandidate, ValidationResult

MISSING_FILE_MESSAGE = "Please select a file"
UNSUPPORTED_TYPE_MESSAGE = "Only PDF files are supported"


def validate(
    candidate: UploadCandidate | None,
    constraints: FileConstraints,
) -> ValidationResult:
    """Check a candidate against the configured constraints.

    All failing checks are reported, so a file that is both too large and of the
    wrong type yields two violations.
    """
    if candidate is None:
        return ValidationResult(is_admissible=False, violations=(MISSING_FILE_MESSAGE,))

    violations: list[str] = []
    if candidate.media_type not in constraints.accepted_media_types:
        violations.append(UNSUPPORTED_TYPE_MESSAGE)
    if candidate.size_bytes > constraints.max_size_bytes:
        violations.append(size_limit_message(constraints.max_size_bytes))

    return ValidationResult(is_admissible=not violations, violations=tuple(violations))


def size_limit_message(max_size_bytes: int) -> str:
    max_size_mb = max_size_bytes / 1024 / 1024
    if max_size_mb.is_integer():
        return f"File size must be less than {int(max_size_mb)} MB"
    return f"File size must be less than {round(max_size_mb, 2)} MB"
