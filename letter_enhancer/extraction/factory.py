from letter_enhancer.config.settings import Settings
from letter_enhancer.extraction.base import BasePdfExtractor
from letter_enhancer.extraction.docx_adapter import DocxAdapter
from letter_enhancer.extraction.file_loader import FileLoader
from letter_enhancer.extraction.file_text_extractor import FileTextExtractor
from letter_enhancer.extraction.pdfplumber_adapter import PdfPlumberAdapter
from letter_enhancer.extraction.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


def build_file_text_extractor(settings: Settings) -> FileTextExtractor:
    """Build a FileTextExtractor with the configured format adapters."""
    return FileTextExtractor(
        file_loader=FileLoader(),
        pdf_extractor=PdfExtractorFactory.create(settings),
        document_extractor=DocxAdapter(),
        max_file_size_bytes=settings.max_file_size_bytes,
        supported_formats=settings.supported_format_list,
    )
