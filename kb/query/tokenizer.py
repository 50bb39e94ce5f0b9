"""
Query lexer.

Single left-to-right scan over the raw search string, no backtracking:

    "exact phrase"   -> PHRASE   (runs to the next quote or end of input)
    ( )              -> LPAREN / RPAREN (reserved for grouping, not evaluated)
    -term            -> EXCLUDE
    AND / OR         -> operators (case-insensitive)
    field:value      -> FILTER   (non-empty text on both sides of the first ':')
    anything else    -> TERM

Quoted phrases have no escape sequences: an inner quote ends the phrase.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

# Characters that end a bare word or an exclusion
WORD_BREAKS = frozenset('()"')


class TokenType(Enum):
    PHRASE = "PHRASE"
    FILTER = "FILTER"
    EXCLUDE = "EXCLUDE"
    AND = "AND"
    OR = "OR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    TERM = "TERM"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    field: Optional[str] = None  # FILTER tokens only


def tokenize(query: str) -> List[Token]:
    """Split a query string into tokens"""
    tokens: List[Token] = []
    i = 0
    length = len(query)

    while i < length:
        char = query[i]

        if char.isspace():
            i += 1
            continue

        if char == '"':
            end = query.find('"', i + 1)
            if end == -1:
                end = length
            phrase = query[i + 1:end]
            if phrase:
                tokens.append(Token(TokenType.PHRASE, phrase))
            i = end + 1
            continue

        if char == '(':
            tokens.append(Token(TokenType.LPAREN, '('))
            i += 1
            continue
        if char == ')':
            tokens.append(Token(TokenType.RPAREN, ')'))
            i += 1
            continue

        if char == '-':
            end = _word_end(query, i + 1)
            term = query[i + 1:end]
            if term:
                tokens.append(Token(TokenType.EXCLUDE, term))
            i = end
            continue

        end = _word_end(query, i)
        tokens.append(_classify_word(query[i:end]))
        i = end

    return tokens


def _word_end(query: str, start: int) -> int:
    """Index just past a run without whitespace, parens or quotes"""
    i = start
    while i < len(query) and not query[i].isspace() and query[i] not in WORD_BREAKS:
        i += 1
    return i


def _classify_word(word: str) -> Token:
    """Operator check first, then filter check, then plain term"""
    upper = word.upper()
    if upper == 'AND':
        return Token(TokenType.AND, 'AND')
    if upper == 'OR':
        return Token(TokenType.OR, 'OR')

    colon = word.find(':')
    if 0 < colon < len(word) - 1:
        return Token(TokenType.FILTER, word[colon + 1:], field=word[:colon])

    return Token(TokenType.TERM, word)
