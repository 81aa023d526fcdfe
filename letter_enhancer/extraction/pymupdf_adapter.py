import pymupdf

from letter_enhancer.extraction.base import BasePdfExtractor
from letter_enhancer.extraction.exceptions import DocumentParseError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text from PDF using PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_text() for page in doc]
        except Exception as exc:
            raise DocumentParseError(f"pymupdf extraction failed: {exc}") from exc
