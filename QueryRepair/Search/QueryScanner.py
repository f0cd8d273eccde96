"""
Quote-aware scanner for raw search queries.

Splits a query into whitespace separated terms and reports the places where the
quoting is ambiguous. It does not know about the rest of the search grammar:
a term is an optional `-` negation, an optional `field:` prefix and a value,
where the value is either a bare word or a quoted phrase in which a backslash
escapes the following character.

    repo:foo "hello world" -file:"a b"     -> parses cleanly
    fmt.Sprintf("                          -> stray quote
    "unterminated                           -> unterminated phrase
"""
import re
from dataclasses import dataclass
from typing import List, Tuple

QUOTE = '"'
ESCAPE = "\\"

_TERM_PREFIX = re.compile(r"-?(?:[A-Za-z_][A-Za-z0-9_]*:)?")

UNTERMINATED = "unterminated"
STRAY_QUOTE = "stray_quote"
TRAILING_TEXT = "trailing_text"


@dataclass(frozen=True)
class Token:
    value: str
    start: int
    end: int
    quoted: bool = False


@dataclass(frozen=True)
class QuoteProblem:
    kind: str
    position: int


def _read_phrase(raw: str, pos: int) -> Tuple[int, bool]:
    """Read a quoted phrase starting at the opening quote.
    Returns the index just past the closing quote and whether one was found.
    """
    i = pos + 1
    while i < len(raw):
        ch = raw[i]
        if ch == ESCAPE:
            if i + 1 >= len(raw):
                return len(raw), False
            i += 2
        elif ch == QUOTE:
            return i + 1, True
        else:
            i += 1
    return len(raw), False


def _scan(raw: str) -> Tuple[List[Token], List[QuoteProblem]]:
    tokens: List[Token] = []
    problems: List[QuoteProblem] = []
    i = 0
    n = len(raw)
    while i < n:
        if raw[i].isspace():
            i += 1
            continue

        start = i
        prefix = _TERM_PREFIX.match(raw, i)
        value_start = prefix.end()

        if value_start < n and raw[value_start] == QUOTE:
            end, closed = _read_phrase(raw, value_start)
            if not closed:
                problems.append(QuoteProblem(UNTERMINATED, value_start))
                tokens.append(Token(raw[start:end], start, end, quoted=True))
                break
            if end < n and not raw[end].isspace():
                problems.append(QuoteProblem(TRAILING_TEXT, end))
                while end < n and not raw[end].isspace():
                    end += 1
            tokens.append(Token(raw[start:end], start, end, quoted=True))
            i = end
            continue

        end = value_start
        while end < n and not raw[end].isspace():
            if raw[end] == QUOTE:
                problems.append(QuoteProblem(STRAY_QUOTE, end))
            end += 1
        tokens.append(Token(raw[start:end], start, end))
        i = end

    return tokens, problems


def scan(raw: str) -> List[Token]:
    return _scan(raw)[0]


def find_quote_problems(raw: str) -> List[QuoteProblem]:
    return _scan(raw)[1]


def parses_cleanly(raw: str) -> bool:
    """True when no quote in `raw` is ambiguous."""
    return not find_quote_problems(raw)
