"""
Extractors package

One extractor per format, each in its own module:
    from ingestion.extractors import PDFExtractor, HTMLExtractor, etc.

PDF and DOCX byte-level extraction is delegated to pypdf and python-docx.
"""
from ingestion.extractors.text_file_extractor import TextFileExtractor
from ingestion.extractors.html_extractor import HTMLExtractor
from ingestion.extractors.pdf_extractor import PDFExtractor
from ingestion.extractors.docx_extractor import DOCXExtractor

__all__ = [
    'TextFileExtractor',
    'HTMLExtractor',
    'PDFExtractor',
    'DOCXExtractor',
]
