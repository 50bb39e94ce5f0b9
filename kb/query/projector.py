"""
Projections of a ParsedQuery for the hybrid search engine.

- to_semantic_query: text for the embedding model
- to_fts_query: text for keyword ranking
- matches_filters / should_exclude: post-filters on search results

All matching is case-insensitive substring matching.
"""
from typing import Any, Iterable, Mapping, Optional

from value_objects import ParsedQuery, QueryFilter


def to_semantic_query(parsed: ParsedQuery) -> str:
    """Semantic terms joined by spaces, minus any term hit by an exclusion"""
    excluded = [term.lower() for term in parsed.exclude_terms]
    kept = [
        term for term in parsed.semantic_terms
        if not any(ex in term.lower() for ex in excluded)
    ]
    return ' '.join(kept)


def to_fts_query(parsed: ParsedQuery) -> str:
    """Quoted phrases followed by the terms no phrase already covers"""
    parts = [f'"{phrase}"' for phrase in parsed.phrases]
    for term in parsed.semantic_terms:
        # Phrases are in semantic_terms too; this also skips them here
        if not any(term in phrase for phrase in parsed.phrases):
            parts.append(term)
    return ' '.join(parts)


def matches_filters(metadata: Optional[Mapping[str, Any]],
                    filters: Iterable[QueryFilter]) -> bool:
    """Check every filter's field exists and contains the filter value"""
    filters = list(filters)
    if not filters:
        return True
    if metadata is None:
        return False

    for query_filter in filters:
        value = metadata.get(query_filter.field)
        if value is None:
            return False
        if query_filter.value.lower() not in str(value).lower():
            return False
    return True


def should_exclude(text: str, exclude_terms: Iterable[str]) -> bool:
    """Check if text contains any excluded term"""
    lower_text = (text or '').lower()
    return any(term.lower() in lower_text for term in exclude_terms)
