"""Turns an uploaded file into plain text, or a typed failure."""

import asyncio

from letter_enhancer.domain.models import ErrorKind, ExtractionResult, UploadedFile
from letter_enhancer.extraction.base import BaseDocumentExtractor, BasePdfExtractor
from letter_enhancer.extraction.exceptions import ExtractionError
from letter_enhancer.extraction.file_loader import FileLoader
from letter_enhancer.logging.logger import Log

PLAIN_TEXT_FORMATS = frozenset({".txt", ".md"})
PDF_FORMAT = ".pdf"
DOCX_FORMAT = ".docx"


def format_hint_for(filename: str) -> str:
    """Derive the format hint from the last dot-separated segment of a name."""
    return "." + filename.rsplit(".", 1)[-1].lower()


def decode_plain_text(data: bytes) -> str:
    """Decode UTF-8 text the way a browser text reader does."""
    return data.decode("utf-8-sig", errors="replace")


class FileTextExtractor:
    """Validates an uploaded file and extracts its text by format."""

    def __init__(
        self,
        *,
        file_loader: FileLoader,
        pdf_extractor: BasePdfExtractor,
        document_extractor: BaseDocumentExtractor,
        max_file_size_bytes: int,
        supported_formats: list[str],
    ) -> None:
        self._file_loader = file_loader
        self._pdf_extractor = pdf_extractor
        self._document_extractor = document_extractor
        self._max_file_size_bytes = max_file_size_bytes
        handled = PLAIN_TEXT_FORMATS | {PDF_FORMAT, DOCX_FORMAT}
        self._supported_formats = [f for f in supported_formats if f in handled]

    @property
    def max_file_size_bytes(self) -> int:
        return self._max_file_size_bytes

    @property
    def supported_formats(self) -> list[str]:
        return list(self._supported_formats)

    async def extract(self, file: UploadedFile, format_hint: str) -> ExtractionResult:
        """Extract plain text from ``file``. Never raises."""
        if file.size > self._max_file_size_bytes:
            Log.warning(
                f"Rejected {file.name}: {file.size} bytes exceeds "
                f"{self._max_file_size_bytes}"
            )
            return ExtractionResult.failure(
                ErrorKind.FILE_TOO_LARGE,
                f"File size must be less than {format_file_size(self._max_file_size_bytes)}",
            )

        fmt = format_hint.lower()
        if fmt not in self._supported_formats:
            Log.warning(f"Rejected {file.name}: unsupported format '{fmt}'")
            return ExtractionResult.failure(
                ErrorKind.UNSUPPORTED_FORMAT,
                f"Please use one of these formats: {', '.join(self._supported_formats)}",
            )

        try:
            raw_bytes = await self._file_loader.load(file)
            text = await self._extract_text(raw_bytes, fmt)
        except ExtractionError as exc:
            Log.error(f"Extraction failed for {file.name}: {exc}")
            return ExtractionResult.failure(ErrorKind.EXTRACTION_FAILURE, str(exc))

        if not text.strip():
            Log.warning(f"No text found in {file.name}")
            return ExtractionResult.failure(
                ErrorKind.EMPTY_CONTENT,
                "No text found. Please paste the text manually.",
            )

        Log.info(f"Extracted {len(text)} chars from {file.name}")
        return ExtractionResult.success(text)

    async def _extract_text(self, raw_bytes: bytes, fmt: str) -> str:
        if fmt in PLAIN_TEXT_FORMATS:
            return decode_plain_text(raw_bytes)
        if fmt == PDF_FORMAT:
            pages = await asyncio.to_thread(self._pdf_extractor.extract_pages, raw_bytes)
            return "\n".join(pages)
        return await asyncio.to_thread(self._document_extractor.extract_raw_text, raw_bytes)


def format_file_size(size_bytes: int) -> str:
    """Human-readable size, e.g. ``2 MB`` or ``1.5 KB``."""
    if size_bytes == 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"
