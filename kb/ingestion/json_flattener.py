"""
JSON / JSONL to searchable text.

Turns nested JSON into 'path: value' lines optimized for semantic search:
- field names are preserved for keyword matching
- nested objects use dot notation: user.address.city: Seattle
- arrays of primitives are joined: characters: Alice, Bob, Charlie
- arrays holding objects are indexed: chapters[0].name: Chapter One
- leaves are filtered by RagFieldPolicy (ids, flags, numbers dropped)

JSONL records are prefixed with their position among *valid* records,
so a corrupt line never shifts or breaks the numbering of the others.
"""
import json
import logging
from typing import Any, Iterator, List, Optional

from ingestion.rag_field_policy import RagFieldPolicy

logger = logging.getLogger(__name__)


def iter_jsonl_records(content: str, containers_only: bool = False) -> Iterator[Any]:
    """Yield each parseable non-blank line of a JSONL stream

    Malformed lines are skipped silently; they never abort the stream.

    Args:
        content: Raw file content
        containers_only: Only yield lines holding an object or array
    """
    for line_number, line in enumerate(content.split('\n'), 1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            record = json.loads(stripped)
        except ValueError:
            logger.debug(f"JSONL line {line_number} skipped (invalid JSON)")
            continue
        if containers_only and not isinstance(record, (dict, list)):
            continue
        yield record


class JsonFlattener:
    """Depth-first walk of parsed JSON, emitting filtered 'path: value' lines

    Input is always parsed JSON, so it is acyclic by construction.
    """

    def __init__(self, policy: Optional[RagFieldPolicy] = None):
        self.policy = policy or RagFieldPolicy()

    def flatten(self, value: Any, prefix: str = '') -> List[str]:
        """Flatten a JSON value into output lines

        Args:
            value: Parsed JSON value
            prefix: Path of the value ('' at the document root)

        Returns:
            Lines in document order; empty if nothing passes the policy
        """
        if value is None:
            return []
        if isinstance(value, dict):
            return self._flatten_object(value, prefix)
        if isinstance(value, list):
            return self._flatten_array(value, prefix)
        if self.policy.keeps(prefix, value):
            return [self._line(prefix, value)]
        return []

    def flatten_document(self, data: Any) -> str:
        """Flatten one whole JSON document

        Object roots give unprefixed lines, array roots holding objects
        give '[i].field' lines.
        """
        return '\n'.join(self.flatten(data))

    def flatten_jsonl(self, content: str, containers_only: bool = False) -> str:
        """Flatten a JSONL stream, one '[i]'-prefixed group per valid record

        Returns '' when no line parses: nothing to ingest is not an error.

        Args:
            content: Raw file content
            containers_only: Only object/array lines are records (and take
                an index); must match what format detection counted
        """
        groups = []
        count = 0
        for index, record in enumerate(iter_jsonl_records(content, containers_only)):
            count = index + 1
            lines = self.flatten(record, f'[{index}]')
            if lines:
                groups.append('\n'.join(lines))
        logger.debug(f"Flattened JSONL stream ({count} records, {len(groups)} with text)")
        return '\n'.join(groups)

    def _flatten_object(self, obj: dict, prefix: str) -> List[str]:
        """Recurse into each key in the object's own ordering"""
        lines = []
        for key, val in obj.items():
            path = f'{prefix}.{key}' if prefix else key
            lines.extend(self.flatten(val, path))
        return lines

    def _flatten_array(self, items: list, prefix: str) -> List[str]:
        """Index arrays holding containers, join arrays of primitives"""
        if not items:
            return []
        if any(isinstance(item, (dict, list)) for item in items):
            lines = []
            for index, item in enumerate(items):
                lines.extend(self.flatten(item, f'{prefix}[{index}]'))
            return lines

        kept = [item for item in items if self.policy.keeps(prefix, item)]
        if not kept:
            return []
        return [self._line(prefix, ', '.join(kept))]

    @staticmethod
    def _line(path: str, value: str) -> str:
        return f'{path}: {value}' if path else value
