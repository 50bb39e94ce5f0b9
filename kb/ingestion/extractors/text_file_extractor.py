"""
Text file extractor

Reads plain text and markdown files; content is returned unchanged
apart from a leading byte-order mark.
"""
from pathlib import Path
from domain_models import ExtractionResult

BOM = '\ufeff'


class TextFileExtractor:
    """Extracts text from plain text files"""

    @staticmethod
    def extract(path: Path) -> ExtractionResult:
        """Extract text from file"""
        return ExtractionResult(pages=[(TextFileExtractor.read(path), None)], method='text')

    @staticmethod
    def read(path: Path) -> str:
        """Read file as UTF-8 without its byte-order mark"""
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            text = f.read()
        return TextFileExtractor.strip_bom(text)

    @staticmethod
    def strip_bom(text: str) -> str:
        return text[1:] if text.startswith(BOM) else text
