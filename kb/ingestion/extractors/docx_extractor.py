"""
DOCX body text extractor.

Word documents have no stable page boundaries, so the whole body is
returned as one unnumbered page: paragraph texts in document order, one
per line. Headers, footers and comments are not part of the body and are
not indexed.

python-docx raises on anything that is not a valid Office package; the
error propagates and DocumentParser reports it as a FileOperationError.
"""
from pathlib import Path

from docx import Document
from domain_models import ExtractionResult
import ingestion.logging_config  # noqa: F401


class DOCXExtractor:
    """Extracts body paragraphs from DOCX files"""

    @staticmethod
    def extract(path: Path) -> ExtractionResult:
        document = Document(str(path))
        body = '\n'.join(paragraph.text for paragraph in document.paragraphs)
        return ExtractionResult(pages=[(body, None)], method='docx')
