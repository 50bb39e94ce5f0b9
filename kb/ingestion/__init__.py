"""
Ingestion package - Document files to normalized text.

This package handles the parsing front end of the ingestion pipeline:
- Sandboxed file access (base directory + size ceiling)
- Format detection by extension and content sniffing
- Text extraction from TXT, MD, HTML, PDF, DOCX
- JSON / JSONL flattening with RAG relevance filtering

Usage:
    from ingestion import DocumentParser
    parser = DocumentParser(ParserConfig(base_dir=Path("/app/kb")))
    text = parser.parse_file("/app/kb/notes/story.jsonl")
"""

# Sandbox
from .path_guard import PathSecurityGuard

# Format detection
from .format_detector import FormatDetector, SUPPORTED_EXTENSIONS

# JSON flattening
from .rag_field_policy import RagFieldPolicy
from .json_flattener import JsonFlattener, iter_jsonl_records

# Parser
from .document_parser import DocumentParser

__all__ = [
    'PathSecurityGuard',
    'FormatDetector',
    'SUPPORTED_EXTENSIONS',
    'RagFieldPolicy',
    'JsonFlattener',
    'iter_jsonl_records',
    'DocumentParser',
]
