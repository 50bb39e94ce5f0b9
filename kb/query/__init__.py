"""
Query package - search strings to structured multi-modal queries.

    from query import parse_query, to_semantic_query, to_fts_query
    parsed = parse_query('"foo bar" -baz author:alice OR term')
"""
from .tokenizer import Token, TokenType, tokenize
from .parser import parse_query
from .projector import matches_filters, should_exclude, to_fts_query, to_semantic_query

__all__ = [
    'Token',
    'TokenType',
    'tokenize',
    'parse_query',
    'to_semantic_query',
    'to_fts_query',
    'matches_filters',
    'should_exclude',
]
