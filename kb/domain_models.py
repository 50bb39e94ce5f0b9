"""Domain models for the document parsing pipeline"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

class DocumentFormat(str, Enum):
    """Parsing strategy chosen for a file"""
    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"
    PDF = "pdf"
    DOCX = "docx"
    JSON = "json"
    JSONL = "jsonl"

    @property
    def is_binary(self) -> bool:
        """Binary formats are handed to an extraction engine, never read as text"""
        return self in (DocumentFormat.PDF, DocumentFormat.DOCX)

@dataclass
class ExtractionResult:
    """Result of text extraction from document"""
    pages: list[tuple[str, Optional[int]]]  # List of (text, page_num) tuples
    method: str  # 'pypdf', 'docx', 'html', 'text'

    @property
    def page_count(self) -> int:
        """Number of pages extracted"""
        return len(self.pages)

    @property
    def total_chars(self) -> int:
        """Total characters extracted"""
        return sum(len(text) for text, _ in self.pages)

    @property
    def text(self) -> str:
        """All page texts joined by newlines"""
        return '\n'.join(text for text, _ in self.pages)
