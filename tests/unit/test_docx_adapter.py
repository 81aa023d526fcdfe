import pytest

from letter_enhancer.extraction.docx_adapter import DocxAdapter
from letter_enhancer.extraction.exceptions import DocumentParseError


class TestDocxAdapter:
    def test_extracts_paragraphs_separated_by_newline(self, sample_docx_bytes: bytes) -> None:
        adapter = DocxAdapter()
        text = adapter.extract_raw_text(sample_docx_bytes)
        assert "Dear hiring manager,\nI am writing to apply." in text

    def test_empty_document_is_blank(self, empty_docx_bytes: bytes) -> None:
        adapter = DocxAdapter()
        assert adapter.extract_raw_text(empty_docx_bytes).strip() == ""

    def test_raises_on_invalid_bytes(self) -> None:
        adapter = DocxAdapter()
        with pytest.raises(DocumentParseError, match="python-docx"):
            adapter.extract_raw_text(b"not a docx")
