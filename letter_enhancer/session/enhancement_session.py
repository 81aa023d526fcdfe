"""Orchestrates input, extraction and submission for one letter."""

from pathlib import Path

from letter_enhancer.domain.models import (
    ErrorKind,
    ExtractionResult,
    NotificationKind,
    SessionState,
    SubmissionOutcome,
    UploadedFile,
)
from letter_enhancer.enhancement.client_base import BaseSubmissionClient
from letter_enhancer.extraction.file_text_extractor import FileTextExtractor, format_hint_for
from letter_enhancer.logging.logger import Log
from letter_enhancer.session.input_normalizer import InputNormalizer
from letter_enhancer.session.presenter import BasePresenter

_EXTRACTION_MESSAGES: dict[ErrorKind, tuple[NotificationKind, str]] = {
    ErrorKind.FILE_TOO_LARGE: (NotificationKind.ERROR, "File Too Large"),
    ErrorKind.UNSUPPORTED_FORMAT: (NotificationKind.ERROR, "Unsupported Format"),
    ErrorKind.EMPTY_CONTENT: (NotificationKind.WARNING, "No Text Found"),
    ErrorKind.EXTRACTION_FAILURE: (NotificationKind.ERROR, "Extraction Failed"),
}

_SUBMISSION_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.TIMEOUT: "The enhancement service did not respond in time. Please try again.",
    ErrorKind.NETWORK_ERROR: "Failed to enhance your letter. Please check your connection.",
    ErrorKind.SERVICE_ERROR: "The enhancement service returned an error. Please try again.",
    ErrorKind.MALFORMED_RESPONSE: "The enhancement service sent an unexpected response.",
}


class EnhancementSession:
    """Owns the letter and session state, and talks to the presenter.

    At most one submission is in flight. File selections, removals and pastes
    each advance a selection token so that a late extraction for a file that is
    no longer selected is dropped.
    """

    def __init__(
        self,
        *,
        normalizer: InputNormalizer,
        extractor: FileTextExtractor,
        client: BaseSubmissionClient,
        presenter: BasePresenter,
        endpoint: str,
        timeout_ms: int,
        enable_diff_view: bool = True,
        enable_file_upload: bool = True,
    ) -> None:
        self._normalizer = normalizer
        self._extractor = extractor
        self._client = client
        self._presenter = presenter
        self._endpoint = endpoint
        self._timeout_ms = timeout_ms
        self._enable_diff_view = enable_diff_view
        self._enable_file_upload = enable_file_upload
        self._state = SessionState.IDLE
        self._selection_token = 0
        self._submitted_snapshot: str | None = None
        self._last_failure: SubmissionOutcome | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def normalizer(self) -> InputNormalizer:
        return self._normalizer

    @property
    def last_failure(self) -> SubmissionOutcome | None:
        return self._last_failure

    @property
    def submitted_snapshot(self) -> str | None:
        return self._submitted_snapshot

    def check_configuration(self) -> bool:
        """Warn up front when no endpoint is configured."""
        if self._endpoint.strip():
            return True
        self._presenter.notify(
            NotificationKind.WARNING,
            "Configuration Required",
            "Please configure the enhancement webhook URL (WEBHOOK_URL).",
        )
        return False

    def on_paste(self, text: str) -> None:
        self._selection_token += 1
        self._reset_state()
        self._normalizer.set_pasted_text(text)
        self._presenter.render_enhanced("")

    async def on_file_selected(self, file: UploadedFile) -> ExtractionResult | None:
        """Extract text from a newly selected file.

        Returns the extraction result, or None if the file upload feature is
        off or another selection superseded this one while it was extracting.
        """
        if not self._enable_file_upload:
            self._presenter.notify(
                NotificationKind.WARNING, "Upload Disabled", "File upload is not enabled."
            )
            return None

        self._selection_token += 1
        token = self._selection_token
        Log.info(f"Processing file {file.name} ({file.size} bytes)")

        result = await self._extractor.extract(file, format_hint_for(file.name))

        if token != self._selection_token:
            Log.debug(f"Discarding stale extraction result for {file.name}")
            return None

        self._reset_state()
        self._normalizer.set_extracted_text(result)
        self._presenter.render_enhanced("")
        if result.ok:
            self._presenter.render_original(result.text)
            self._presenter.notify(
                NotificationKind.SUCCESS, "File Processed", "Text extracted successfully"
            )
        else:
            kind, title = _extraction_message(result.reason)
            self._presenter.notify(kind, title, result.detail)
        return result

    def on_file_removed(self) -> None:
        self._selection_token += 1
        self._reset_state()
        self._normalizer.clear()
        self._presenter.render_enhanced("")

    async def on_analyze_requested(self) -> SubmissionOutcome:
        return await self.analyze()

    async def analyze(self) -> SubmissionOutcome:
        """Submit the current text once and surface the outcome."""
        if self._state is SessionState.SUBMITTING:
            Log.warning("Analysis already in progress, ignoring request")
            self._presenter.notify(
                NotificationKind.WARNING,
                "Analysis In Progress",
                "Please wait for the current analysis to finish.",
            )
            return SubmissionOutcome.failure(ErrorKind.ALREADY_IN_PROGRESS)

        if not self._endpoint.strip():
            self._presenter.notify(
                NotificationKind.ERROR,
                "Configuration Error",
                "The enhancement webhook URL is not configured.",
            )
            return SubmissionOutcome.failure(ErrorKind.MISSING_CONFIGURATION)

        if not self._normalizer.has_content():
            self._presenter.notify(
                NotificationKind.ERROR, "No Content", "Please provide some text to analyze."
            )
            return SubmissionOutcome.failure(ErrorKind.NO_CONTENT)

        snapshot = self._normalizer.current_text()
        self._state = SessionState.SUBMITTING
        self._submitted_snapshot = snapshot
        self._presenter.set_busy(True)
        try:
            outcome = await self._client.submit(snapshot, self._endpoint, self._timeout_ms)
        except Exception as exc:
            Log.error(f"Unexpected error during submission: {exc}")
            outcome = SubmissionOutcome.failure(ErrorKind.NETWORK_ERROR, str(exc))
        finally:
            self._presenter.set_busy(False)

        if outcome.ok:
            self._apply_success(snapshot, outcome.enhanced_text)
        else:
            self._apply_failure(outcome)
        return outcome

    def export_enhanced(self, path: Path) -> ErrorKind | None:
        """Write the enhanced text to ``path``; returns an error kind on failure."""
        enhanced = self._normalizer.valid_enhanced_text()
        if enhanced is None:
            self._presenter.notify(
                NotificationKind.ERROR, "No Content", "No enhanced text to download"
            )
            return ErrorKind.NO_CONTENT
        try:
            path.write_text(enhanced, encoding="utf-8")
        except OSError as exc:
            Log.error(f"Failed to write enhanced text to {path}: {exc}")
            self._presenter.notify(
                NotificationKind.ERROR,
                "Download Failed",
                f"Could not save the enhanced text: {exc}",
            )
            return ErrorKind.EXPORT_FAILURE
        Log.info(f"Enhanced text written to {path}")
        self._presenter.notify(
            NotificationKind.SUCCESS, "Downloaded!", "Enhanced text downloaded successfully"
        )
        return None

    def _reset_state(self) -> None:
        if self._state is not SessionState.SUBMITTING:
            self._state = SessionState.IDLE

    def _apply_success(self, snapshot: str, enhanced_text: str) -> None:
        self._state = SessionState.DONE
        self._last_failure = None
        self._normalizer.store_enhanced(snapshot, enhanced_text)

        enhanced = self._normalizer.valid_enhanced_text()
        if enhanced is None:
            Log.debug("Input changed during submission, discarding enhanced text")
            return

        self._presenter.render_original(snapshot)
        self._presenter.render_enhanced(enhanced)
        if self._enable_diff_view:
            self._presenter.render_diff(snapshot, enhanced)
        self._presenter.notify(
            NotificationKind.SUCCESS,
            "Analysis Complete",
            "Your motivation letter has been enhanced successfully!",
        )

    def _apply_failure(self, outcome: SubmissionOutcome) -> None:
        self._state = SessionState.FAILED
        self._last_failure = outcome
        reason = outcome.reason or ErrorKind.NETWORK_ERROR
        message = _SUBMISSION_MESSAGES.get(
            reason, "Failed to enhance your letter. Please try again."
        )
        if outcome.status_code is not None:
            message = f"{message} (HTTP {outcome.status_code})"
        Log.error(f"Analysis failed: {reason.value} {outcome.detail}")
        self._presenter.notify(NotificationKind.ERROR, "Analysis Failed", message)


def _extraction_message(reason: ErrorKind | None) -> tuple[NotificationKind, str]:
    if reason is None:
        return NotificationKind.ERROR, "Extraction Failed"
    return _EXTRACTION_MESSAGES.get(reason, (NotificationKind.ERROR, "Extraction Failed"))
