"""
Format detection: extension first, content sniffing where ambiguous.

Decision order:
1. Unambiguous extensions (.pdf, .docx, .html/.htm, .md) map directly
2. .json/.jsonl/.ndjson, .txt and unknown extensions are sniffed:
   whole-document JSON first, then line-oriented JSONL
3. Everything else is plain text

Strict JSON always wins over line JSON. The one exception is a .jsonl or
.ndjson file holding a single record on a single line: that is a stream
of one, not a standalone document.
"""
import json
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from domain_models import DocumentFormat
from ingestion.json_flattener import iter_jsonl_records

DIRECT_FORMATS = {
    '.pdf': DocumentFormat.PDF,
    '.docx': DocumentFormat.DOCX,
    '.html': DocumentFormat.HTML,
    '.htm': DocumentFormat.HTML,
    '.md': DocumentFormat.MARKDOWN,
    '.markdown': DocumentFormat.MARKDOWN,
}

JSON_EXTENSIONS = {'.json'}
LINE_JSON_EXTENSIONS = {'.jsonl', '.ndjson'}

SUPPORTED_EXTENSIONS = sorted(
    set(DIRECT_FORMATS) | JSON_EXTENSIONS | LINE_JSON_EXTENSIONS | {'.txt'}
)

_NOT_JSON = object()


class FormatDetector:
    """Maps a file path (and its content, when ambiguous) to a DocumentFormat"""

    def __init__(self, max_document_size: Optional[int] = None):
        """Initialize detector

        Args:
            max_document_size: Content longer than this (in characters) is
                never parsed as one whole JSON document; None means no limit
        """
        self.max_document_size = max_document_size

    def detect(self, path: Union[str, Path], content: Optional[str] = None) -> DocumentFormat:
        """Pick the parsing strategy for a file

        Args:
            path: File path (only the extension is used)
            content: Decoded file content; without it sniffable
                extensions are classified by extension alone

        Returns:
            DocumentFormat to parse the file with
        """
        ext = Path(path).suffix.lower()
        if ext in DIRECT_FORMATS:
            return DIRECT_FORMATS[ext]
        if content is None:
            return self._by_extension(ext)
        return self.classify(path, content)[0]

    def classify(self, path: Union[str, Path], content: str) -> Tuple[DocumentFormat, Any]:
        """Detect the format and keep the parsed document when it is JSON

        Returns:
            (format, document); document is the parsed JSON value for
            DocumentFormat.JSON and None for every other format
        """
        ext = Path(path).suffix.lower()
        if ext in DIRECT_FORMATS:
            return DIRECT_FORMATS[ext], None

        containers_only = self.containers_only(path)
        document = self._parse_whole(content)
        if document is not _NOT_JSON and self._accepts(document, containers_only):
            if ext in LINE_JSON_EXTENSIONS and self._is_single_line(content):
                return DocumentFormat.JSONL, None
            return DocumentFormat.JSON, document

        if next(iter_jsonl_records(content, containers_only), _NOT_JSON) is not _NOT_JSON:
            return DocumentFormat.JSONL, None

        structured = not containers_only
        return (DocumentFormat.JSONL if structured else DocumentFormat.TEXT), None

    def is_supported(self, path: Union[str, Path]) -> bool:
        """Check whether the extension is one the parser knows by name"""
        return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS

    @staticmethod
    def containers_only(path: Union[str, Path]) -> bool:
        """Whether only object/array lines count as JSON records

        True for prose files (.txt and unknown extensions); bare scalars
        count as records only in .json/.jsonl/.ndjson files.
        """
        ext = Path(path).suffix.lower()
        return ext not in JSON_EXTENSIONS and ext not in LINE_JSON_EXTENSIONS

    @staticmethod
    def _by_extension(ext: str) -> DocumentFormat:
        if ext in JSON_EXTENSIONS:
            return DocumentFormat.JSON
        if ext in LINE_JSON_EXTENSIONS:
            return DocumentFormat.JSONL
        return DocumentFormat.TEXT

    def _parse_whole(self, content: str) -> Any:
        """Parse the entire content as one JSON document, or return _NOT_JSON"""
        if self.max_document_size is not None and len(content) > self.max_document_size:
            return _NOT_JSON
        try:
            return json.loads(content)
        except ValueError:
            return _NOT_JSON

    @staticmethod
    def _accepts(document: Any, containers_only: bool) -> bool:
        return not containers_only or isinstance(document, (dict, list))

    @staticmethod
    def _is_single_line(content: str) -> bool:
        return sum(1 for line in content.split('\n') if line.strip()) == 1
