from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Every recoverable failure the intake and submission pipeline reports."""

    FILE_TOO_LARGE = "file_too_large"
    UNSUPPORTED_FORMAT = "unsupported_format"
    EMPTY_CONTENT = "empty_content"
    EXTRACTION_FAILURE = "extraction_failure"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    SERVICE_ERROR = "service_error"
    MALFORMED_RESPONSE = "malformed_response"
    ALREADY_IN_PROGRESS = "already_in_progress"
    NO_CONTENT = "no_content"
    MISSING_CONFIGURATION = "missing_configuration"
    EXPORT_FAILURE = "export_failure"


class InputSource(str, Enum):
    PASTE = "paste"
    FILE = "file"


class SessionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    DONE = "done"
    FAILED = "failed"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file. ``size`` is known without reading the content."""

    name: str
    size: int
    content: bytes | None = None
    path: Path | None = None

    @classmethod
    def from_bytes(cls, name: str, content: bytes) -> "UploadedFile":
        return cls(name=name, size=len(content), content=content)

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        return cls(name=path.name, size=path.stat().st_size, path=path)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of turning one file into plain text."""

    ok: bool
    text: str = ""
    reason: ErrorKind | None = None
    detail: str = ""

    @classmethod
    def success(cls, text: str) -> "ExtractionResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, reason: ErrorKind, detail: str = "") -> "ExtractionResult":
        return cls(ok=False, reason=reason, detail=detail)


@dataclass(frozen=True)
class SubmissionOutcome:
    """Outcome of one enhancement request.

    ``status_code`` is only set for ``ErrorKind.SERVICE_ERROR``.
    """

    ok: bool
    enhanced_text: str = ""
    reason: ErrorKind | None = None
    status_code: int | None = None
    detail: str = ""

    @classmethod
    def success(cls, enhanced_text: str) -> "SubmissionOutcome":
        return cls(ok=True, enhanced_text=enhanced_text)

    @classmethod
    def failure(
        cls,
        reason: ErrorKind,
        detail: str = "",
        status_code: int | None = None,
    ) -> "SubmissionOutcome":
        return cls(ok=False, reason=reason, status_code=status_code, detail=detail)


@dataclass
class Letter:
    """The in-memory letter being edited.

    ``enhanced_for`` is the submission snapshot ``enhanced_text`` was produced
    from; the enhanced text is only valid while it equals ``original_text``.
    """

    original_text: str = ""
    enhanced_text: str | None = None
    source: InputSource = InputSource.PASTE
    enhanced_for: str | None = None
