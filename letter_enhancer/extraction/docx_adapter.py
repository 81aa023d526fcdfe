import io

import docx

from letter_enhancer.extraction.base import BaseDocumentExtractor
from letter_enhancer.extraction.exceptions import DocumentParseError


class DocxAdapter(BaseDocumentExtractor):
    """Extracts raw paragraph text from .docx files using python-docx."""

    def extract_raw_text(self, document_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(document_bytes))
            return "\n".join(paragraph.text for paragraph in document.paragraphs)
        except Exception as exc:
            raise DocumentParseError(f"python-docx extraction failed: {exc}") from exc
