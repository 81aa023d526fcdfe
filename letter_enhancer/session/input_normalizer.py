from letter_enhancer.domain.models import ExtractionResult, InputSource, Letter


class InputNormalizer:
    """Keeps one canonical letter text, whichever source it came from."""

    def __init__(self) -> None:
        self._letter = Letter()

    @property
    def letter(self) -> Letter:
        return self._letter

    @property
    def source(self) -> InputSource:
        return self._letter.source

    def set_pasted_text(self, text: str) -> None:
        self._replace(text, InputSource.PASTE)

    def set_extracted_text(self, result: ExtractionResult) -> None:
        """Adopt extracted file text. A failed result leaves no usable text."""
        self._replace(result.text if result.ok else "", InputSource.FILE)

    def clear(self) -> None:
        self._replace("", self._letter.source)

    def current_text(self) -> str:
        return self._letter.original_text

    def has_content(self) -> bool:
        return bool(self._letter.original_text.strip())

    def store_enhanced(self, snapshot: str, enhanced_text: str) -> None:
        self._letter.enhanced_text = enhanced_text
        self._letter.enhanced_for = snapshot

    def valid_enhanced_text(self) -> str | None:
        """Enhanced text for the current input, discarding it if stale."""
        letter = self._letter
        if letter.enhanced_text is None:
            return None
        if letter.enhanced_for != letter.original_text:
            letter.enhanced_text = None
            letter.enhanced_for = None
            return None
        return letter.enhanced_text

    def _replace(self, text: str, source: InputSource) -> None:
        self._letter.original_text = text
        self._letter.source = source
        self._letter.enhanced_text = None
        self._letter.enhanced_for = None
