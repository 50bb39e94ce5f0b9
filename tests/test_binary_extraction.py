"""
Tests for PDF and DOCX extraction through DocumentParser.

Real documents are built with pypdf / python-docx where cheap; engine
failures are simulated by patching the reader.
"""
import pytest
from unittest.mock import MagicMock, patch

from docx import Document
from pypdf import PdfWriter

from config import ParserConfig
from errors import FileOperationError, ValidationError
from ingestion.document_parser import DocumentParser
from ingestion.extractors import DOCXExtractor, PDFExtractor


def _page(text):
    page = MagicMock()
    page.extract_text.return_value = text
    return page


class TestDOCXExtraction:
    """python-docx paragraphs joined by newlines"""

    def test_extracts_paragraphs(self, parser, temp_kb_path):
        path = temp_kb_path / "letter.docx"
        doc = Document()
        doc.add_paragraph("Dear reader,")
        doc.add_paragraph("This is the second paragraph.")
        doc.save(str(path))

        result = parser.parse_file(path)

        assert "Dear reader,\nThis is the second paragraph." in result

    def test_extractor_reports_single_unnumbered_page(self, temp_kb_path):
        path = temp_kb_path / "short.docx"
        doc = Document()
        doc.add_paragraph("Only paragraph")
        doc.save(str(path))

        result = DOCXExtractor.extract(path)

        assert result.method == 'docx'
        assert result.page_count == 1
        assert result.pages[0][1] is None

    def test_corrupt_docx_is_file_operation_error(self, parser, write_file):
        path = write_file("broken.docx", "this is not a zip archive")

        with pytest.raises(FileOperationError, match="Failed to parse DOCX"):
            parser.parse_file(path)


class TestPDFExtraction:
    """pypdf page text, skipping pages without a text layer"""

    def test_blank_pdf_yields_empty_string(self, parser, temp_kb_path):
        path = temp_kb_path / "blank.pdf"
        writer = PdfWriter()
        writer.add_blank_page(width=72, height=72)
        with open(path, 'wb') as f:
            writer.write(f)

        assert parser.parse_file(path) == ""

    def test_joins_pages_with_text(self, parser, write_file):
        path = write_file("report.pdf", "%PDF-1.4 placeholder")
        reader = MagicMock()
        reader.pages = [_page("Page one text"), _page("   "), _page(None), _page("Page four text")]

        with patch("ingestion.extractors.pdf_extractor.PdfReader", return_value=reader):
            result = parser.parse_file(path)

        assert result == "Page one text\nPage four text"

    def test_extractor_keeps_page_numbers(self, temp_kb_path):
        reader = MagicMock()
        reader.pages = [_page(""), _page("Second page")]

        with patch("ingestion.extractors.pdf_extractor.PdfReader", return_value=reader):
            result = PDFExtractor.extract(temp_kb_path / "any.pdf")

        assert result.pages == [("Second page", 2)]
        assert result.method == 'pypdf'

    def test_text_pages_number_counts_skipped_pages(self):
        pages = [_page(None), _page(" \n "), _page("Third"), _page("Fourth")]

        assert PDFExtractor.text_pages(pages) == [("Third", 3), ("Fourth", 4)]

    def test_engine_failure_wraps_cause(self, parser, write_file):
        path = write_file("corrupt.pdf", "garbage")
        cause = RuntimeError("EOF marker not found")

        with patch("ingestion.extractors.pdf_extractor.PdfReader", side_effect=cause):
            with pytest.raises(FileOperationError) as exc_info:
                parser.parse_file(path)

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.details['cause'] == "EOF marker not found"

    def test_oversized_pdf_never_reaches_engine(self, temp_kb_path, write_file):
        parser = DocumentParser(ParserConfig(base_dir=temp_kb_path, max_file_size=4))
        path = write_file("big.pdf", "%PDF-1.4 more than four bytes")

        with patch("ingestion.extractors.pdf_extractor.PdfReader") as reader:
            with pytest.raises(ValidationError):
                parser.parse_file(path)

        reader.assert_not_called()
