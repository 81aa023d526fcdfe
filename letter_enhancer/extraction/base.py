from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the text of each page, in page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One string per page. Pages without text yield an empty string.

        Raises:
            DocumentParseError: if extraction fails for any reason.
        """


class BaseDocumentExtractor(ABC):
    """Contract for word-processor document adapters."""

    @abstractmethod
    def extract_raw_text(self, document_bytes: bytes) -> str:
        """Extract the raw text of a document, ignoring all formatting.

        Raises:
            DocumentParseError: if extraction fails for any reason.
        """
