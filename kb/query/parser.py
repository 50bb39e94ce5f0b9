"""
Query parser: folds tokens into a ParsedQuery.

Syntax:
- "exact phrase"  -> matched exactly, also used for semantic search
- field:value     -> metadata filter
- -term           -> exclude results containing term
- a AND b         -> both terms (default)
- a OR b          -> either term
- (group)         -> tokenized but not evaluated

A single OR anywhere switches the whole query to OR mode; there is no
operator precedence or grouping.
"""
from value_objects import BooleanOp, ParsedQuery, QueryFilter
from query.tokenizer import TokenType, tokenize


def parse_query(query: str) -> ParsedQuery:
    """Parse a raw search string into structured query parts

    Never raises: any input yields a best-effort ParsedQuery.
    """
    if not query or not query.strip():
        return ParsedQuery.empty(query)

    semantic_terms = []
    phrases = []
    filters = []
    exclude_terms = []
    has_or = False

    for token in tokenize(query):
        if token.type is TokenType.PHRASE:
            phrases.append(token.value)
            semantic_terms.append(token.value)
        elif token.type is TokenType.FILTER:
            filters.append(QueryFilter(field=token.field, value=token.value))
        elif token.type is TokenType.EXCLUDE:
            exclude_terms.append(token.value)
        elif token.type is TokenType.TERM:
            semantic_terms.append(token.value)
        elif token.type is TokenType.OR:
            has_or = True
        # AND is the default; parentheses are reserved for grouping

    return ParsedQuery(
        semantic_terms=tuple(semantic_terms),
        phrases=tuple(phrases),
        filters=tuple(filters),
        exclude_terms=tuple(exclude_terms),
        boolean_op=BooleanOp.OR if has_or else BooleanOp.AND,
        original_query=query,
    )
