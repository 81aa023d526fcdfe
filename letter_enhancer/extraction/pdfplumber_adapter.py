import io

import pdfplumber

from letter_enhancer.extraction.base import BasePdfExtractor
from letter_enhancer.extraction.exceptions import DocumentParseError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text from PDF using pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise DocumentParseError(f"pdfplumber extraction failed: {exc}") from exc
