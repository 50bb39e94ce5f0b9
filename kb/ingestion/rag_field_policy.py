"""
Relevance filter for flattened JSON leaves.

Flattened JSON feeds an embedding index, so identifiers, durations,
timestamps and flags are noise rather than semantic signal. The policy
decides per leaf using only:
- the value's type (only strings are ever kept)
- the key name (allow list first, then deny patterns)

It never looks at previous calls or at the string's content beyond
emptiness, so the same (path, value) pair always gets the same answer.
"""
import re
from typing import Any, Iterable, Optional, Pattern, Tuple

# Keys that carry prose even when their name resembles a denied pattern
PROSE_KEYS = frozenset({
    'title',
    'name',
    'heading',
    'caption',
    'summary',
    'scene',
    'chapter',
    'section',
    'speaker',
    'dialogue',
    'line',
    'text',
    'description',
    'content',
    'body',
    'message',
    'note',
    'comment',
    'label',
})

# Matched against the normalized (snake_case, lowercased) key name
DENY_PATTERNS: Tuple[str, ...] = (
    # identifiers
    r'^(id|ids|uuid|guid|key|hash|checksum|md5|sha\d*)$',
    r'_(id|ids|uuid|guid|key|hash|checksum)$',
    # durations
    r'_(ms|msec|millis|us|ns|sec|secs|seconds)$',
    r'^(duration|elapsed)',
    # timestamps
    r'timestamp',
    r'^(ts|created|updated|modified|date|datetime|time)$',
    r'_(at|ts|time|date|datetime)$',
    # flags
    r'^(is|has|can|should)_',
    r'_flag$',
    r'^flags?$',
    r'^(enabled|disabled|active|inactive|visible|hidden|deleted|archived)$',
)

_INDEX_SUFFIX = re.compile(r'(\[\d+\])+$')
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def key_name(field_path: str) -> str:
    """Last path segment without array indices: '[0].user.tags[2]' -> 'tags'"""
    last = field_path.rsplit('.', 1)[-1]
    return _INDEX_SUFFIX.sub('', last)


def normalize_key(key: str) -> str:
    """camelCase and kebab-case to snake_case: 'createdAt' -> 'created_at'"""
    return _CAMEL_BOUNDARY.sub('_', key).replace('-', '_').lower()


class RagFieldPolicy:
    """Decides whether a JSON leaf is kept in the flattened text"""

    def __init__(self, allow_keys: Optional[Iterable[str]] = None,
                 deny_patterns: Optional[Iterable[str]] = None):
        """Initialize with the default lists, extended by the given ones

        Args:
            allow_keys: Extra key names that are always kept
            deny_patterns: Extra regexes matched against the snake_case key
        """
        self.allow_keys = PROSE_KEYS | {normalize_key(k) for k in (allow_keys or ())}
        self._deny: Tuple[Pattern, ...] = tuple(
            re.compile(p) for p in (*DENY_PATTERNS, *(deny_patterns or ()))
        )

    def keeps(self, field_path: str, value: Any) -> bool:
        """Check if a leaf value belongs in the flattened output"""
        # bool is a subclass of int, but neither survives this check
        if not isinstance(value, str):
            return False
        if not value.strip():
            return False
        return self.keeps_key(key_name(field_path))

    def keeps_key(self, key: str) -> bool:
        """Key-name half of the policy"""
        normalized = normalize_key(key)
        if normalized in self.allow_keys:
            return True
        return not any(p.search(normalized) for p in self._deny)
