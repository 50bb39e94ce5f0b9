"""
Document parser.

Composes sandbox validation, format detection and per-format extraction
into one normalized text string per file:

    PathSecurityGuard -> FormatDetector -> extractor / JsonFlattener

Error taxonomy:
- ValidationError: path outside base dir, file or JSON content too large
- FileOperationError: missing/unreadable file, extraction engine failure

Malformed JSONL lines are never errors; they are skipped. A file with
nothing ingestible parses to '' (success).
"""
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from config import ParserConfig
from domain_models import DocumentFormat
from errors import FileOperationError, ValidationError
from ingestion.extractors import DOCXExtractor, HTMLExtractor, PDFExtractor, TextFileExtractor
from ingestion.format_detector import FormatDetector
from ingestion.json_flattener import JsonFlattener
from ingestion.path_guard import PathSecurityGuard
from ingestion.rag_field_policy import RagFieldPolicy

logger = logging.getLogger(__name__)


class DocumentParser:
    """Parses TXT/MD/HTML/PDF/DOCX/JSON/JSONL files into searchable text

    Configuration is read-only after construction, so one instance can
    serve concurrent parse_file calls for different files.
    """

    def __init__(self, config: ParserConfig,
                 policy: Optional[RagFieldPolicy] = None,
                 detector: Optional[FormatDetector] = None):
        """Initialize parser with configuration

        Args:
            config: Sandbox root and size limits
            policy: Relevance filter for JSON leaves (default policy if None)
            detector: Format detector (default detector if None)
        """
        self.config = config
        self.guard = PathSecurityGuard(config.base_dir, config.max_file_size)
        self.detector = detector or FormatDetector(config.max_json_size)
        self.flattener = JsonFlattener(policy)
        self._binary_extractors = {
            DocumentFormat.PDF: PDFExtractor,
            DocumentFormat.DOCX: DOCXExtractor,
        }
        self._text_handlers: Dict[DocumentFormat, Callable[[str, Path], str]] = {
            DocumentFormat.TEXT: self._parse_plain,
            DocumentFormat.MARKDOWN: self._parse_plain,
            DocumentFormat.HTML: self._parse_html,
            DocumentFormat.JSONL: self._parse_jsonl,
        }

    def parse_file(self, file_path: Union[str, Path]) -> str:
        """Parse a file inside the base directory

        Args:
            file_path: Absolute path, or path relative to the base directory

        Returns:
            Normalized text ('' when nothing in the file is ingestible)

        Raises:
            ValidationError: Path outside base dir, file/JSON too large
            FileOperationError: File missing, unreadable, or extraction failed
        """
        path = self.guard.check(file_path)

        fmt = self.detector.detect(path)
        if fmt.is_binary:
            return self._extract_binary(path, fmt)

        content = self._read_text(path)
        return self._parse_text(content, path)

    def parse_content(self, content: str, file_path: Union[str, Path] = '') -> str:
        """Parse already-decoded content as if it came from file_path

        Only the extension of file_path is used; nothing is read from disk.

        Raises:
            ValidationError: Binary format, or JSON content too large
        """
        path = Path(file_path)
        if self.detector.detect(path).is_binary:
            raise ValidationError(
                f"Binary format cannot be parsed from text content: {path.suffix.lower()}"
            )
        return self._parse_text(TextFileExtractor.strip_bom(content), path)

    def detect_file(self, file_path: Union[str, Path]) -> DocumentFormat:
        """Validate a path and report the format it would be parsed as"""
        path = self.guard.check(file_path)
        fmt = self.detector.detect(path)
        if fmt.is_binary:
            return fmt
        return self.detector.detect(path, self._read_text(path))

    def _parse_text(self, content: str, path: Path) -> str:
        """Detect format from content and dispatch to its handler

        Whole-document JSON is parsed once, during detection.
        """
        is_json_file = path.suffix.lower() == '.json'
        if is_json_file:
            self._check_json_size(content, path)

        fmt, document = self.detector.classify(path, content)
        if fmt is DocumentFormat.JSON:
            text = self.flattener.flatten_document(document)
        else:
            if is_json_file:
                logger.info(f"JSON parse failed, using JSONL fallback: {path}")
            text = self._text_handlers[fmt](content, path)
        logger.info(f"Parsed {fmt.value.upper()}: {path} ({len(text)} characters)")
        return text

    def _extract_binary(self, path: Path, fmt: DocumentFormat) -> str:
        """Delegate PDF/DOCX to the extraction engine"""
        extractor = self._binary_extractors[fmt]
        try:
            result = extractor.extract(path)
        except Exception as e:
            raise FileOperationError(
                f"Failed to parse {fmt.value.upper()}: {path}",
                details={'path': str(path), 'cause': str(e)}
            ) from e

        text = result.text
        logger.info(
            f"Parsed {fmt.value.upper()}: {path} "
            f"({len(text)} characters, {result.page_count} pages)"
        )
        return text

    @staticmethod
    def _read_text(path: Path) -> str:
        """Read a text-based file, mapping OS failures to FileOperationError"""
        try:
            return TextFileExtractor.read(path)
        except OSError as e:
            raise FileOperationError(f"Failed to read file: {path}") from e

    @staticmethod
    def _parse_plain(content: str, path: Path) -> str:
        return content

    @staticmethod
    def _parse_html(content: str, path: Path) -> str:
        return HTMLExtractor.to_text(content)

    def _parse_jsonl(self, content: str, path: Path) -> str:
        return self.flattener.flatten_jsonl(content, self.detector.containers_only(path))

    def _check_json_size(self, content: str, path: Path) -> None:
        """Reject JSON too large to parse in memory"""
        if len(content) > self.config.max_json_size:
            raise ValidationError(
                f"JSON content size ({len(content)} characters) exceeds limit "
                f"({self.config.max_json_size} characters): {path}"
            )
