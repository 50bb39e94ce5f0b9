"""
PDF text layer extractor.

Only the embedded text layer is read; there is no OCR. Pages whose text
layer is missing or whitespace-only (scans, blank pages) contribute
nothing, so a fully scanned PDF parses to ''. Page numbers are 1-based
and count skipped pages, so they match the reader's page labels.

Any pypdf failure propagates unchanged; DocumentParser wraps it in a
FileOperationError.
"""
from pathlib import Path
from typing import Iterable, List, Tuple

from pypdf import PdfReader
from domain_models import ExtractionResult
import ingestion.logging_config  # noqa: F401


class PDFExtractor:
    """Extracts the text layer of PDF files page by page"""

    @staticmethod
    def extract(path: Path) -> ExtractionResult:
        reader = PdfReader(str(path))
        return ExtractionResult(pages=PDFExtractor.text_pages(reader.pages), method='pypdf')

    @staticmethod
    def text_pages(pages: Iterable) -> List[Tuple[str, int]]:
        """(text, page number) for every page with a non-blank text layer"""
        found = []
        for number, page in enumerate(pages, 1):
            text = page.extract_text() or ''
            if text.strip():
                found.append((text, number))
        return found
