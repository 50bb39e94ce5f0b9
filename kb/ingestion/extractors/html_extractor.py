"""
HTML file extractor

Strips markup with BeautifulSoup and returns the visible text:
entities are decoded and runs of whitespace collapse to one space.
"""
import re
from pathlib import Path

from bs4 import BeautifulSoup
from domain_models import ExtractionResult
from ingestion.extractors.text_file_extractor import TextFileExtractor
import ingestion.logging_config  # noqa: F401

# Elements whose text is never rendered
INVISIBLE_TAGS = ['script', 'style', 'noscript', 'template', 'head']

_WHITESPACE = re.compile(r'\s+')


class HTMLExtractor:
    """Extracts visible text from HTML files"""

    @staticmethod
    def extract(path: Path) -> ExtractionResult:
        """Extract text from HTML file"""
        markup = TextFileExtractor.read(path)
        return ExtractionResult(pages=[(HTMLExtractor.to_text(markup), None)], method='html')

    @staticmethod
    def to_text(markup: str) -> str:
        """Visible text of an HTML string"""
        soup = BeautifulSoup(markup, 'html.parser')
        for element in soup(INVISIBLE_TAGS):
            element.decompose()
        text = soup.get_text(separator=' ')
        return _WHITESPACE.sub(' ', text).strip()
