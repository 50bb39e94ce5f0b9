"""
Value objects for search queries.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
- Built fresh per search call, never persisted
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

class BooleanOp(Enum):
    """How the terms of a query combine"""
    AND = "AND"
    OR = "OR"

@dataclass(frozen=True)
class QueryFilter:
    """A field:value metadata filter."""
    field: str
    value: str

    def __str__(self) -> str:
        return f"{self.field}:{self.value}"

@dataclass(frozen=True)
class ParsedQuery:
    """Structured form of a user search string.

    Phrases also appear in semantic_terms: they feed the embedding query
    as well as exact full-text matching.
    """
    semantic_terms: Tuple[str, ...] = ()
    phrases: Tuple[str, ...] = ()
    filters: Tuple[QueryFilter, ...] = ()
    exclude_terms: Tuple[str, ...] = ()
    boolean_op: BooleanOp = BooleanOp.AND
    original_query: str = ""

    @classmethod
    def empty(cls, query: str = "") -> 'ParsedQuery':
        """Create the record for a query with nothing in it."""
        return cls(original_query=query or "")

    @property
    def is_empty(self) -> bool:
        """Check if the query carries no searchable parts."""
        return not (self.semantic_terms or self.phrases
                    or self.filters or self.exclude_terms)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary"""
        return {
            'semantic_terms': list(self.semantic_terms),
            'phrases': list(self.phrases),
            'filters': [{'field': f.field, 'value': f.value} for f in self.filters],
            'exclude_terms': list(self.exclude_terms),
            'boolean_op': self.boolean_op.value,
            'original_query': self.original_query,
        }
