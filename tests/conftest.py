"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
"""
import pytest
import sys
from pathlib import Path

# Add kb directory to path for imports
kb_path = Path(__file__).parent.parent / "kb"
sys.path.insert(0, str(kb_path))

from config import ParserConfig  # noqa: E402
from ingestion.document_parser import DocumentParser  # noqa: E402


# =============================================================================
# Knowledge Base Fixtures
# =============================================================================

@pytest.fixture
def temp_kb_path(tmp_path):
    """Create a temporary knowledge base directory.

    Use this as the sandbox root for parser tests.
    """
    kb_path = tmp_path / "knowledge_base"
    kb_path.mkdir(parents=True, exist_ok=True)
    return kb_path


@pytest.fixture
def parser(temp_kb_path):
    """DocumentParser sandboxed to temp_kb_path with a 100 MB limit"""
    return DocumentParser(ParserConfig(base_dir=temp_kb_path, max_file_size=100 * 1024 * 1024))


@pytest.fixture
def write_file(temp_kb_path):
    """Write a UTF-8 file into the knowledge base and return its path"""
    def _write(name: str, content: str) -> Path:
        path = temp_kb_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
    return _write
