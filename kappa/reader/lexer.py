"""
  Kappa Lexer

- Converts source text into positioned tokens, one at a time
- Lines and columns are 1-based; a newline moves to the next line and resets
  the column, every other character advances the column by one

Token kinds:

    - (  ->  LPAREN
    - )  ->  RPAREN
    - '  ->  QUOTE
    - "..."  ->  STRING (raw content, no escapes; may span lines)
    - -12, 3.5, 7.  ->  NUMBER
    - foo, +, <=, set!  ->  SYMBOL
    - end of input  ->  EOF (repeated on every further call)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from kappa.errors import UnexpectedCharacter, UnterminatedString


class TokenKind(Enum):
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"
    STRING = "string"
    NUMBER = "number"
    SYMBOL = "symbol"
    EOF = "eof"


@dataclass(frozen=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: Position


WHITESPACE = " \t\r\n"

# Alternation order matters: a number wins over a symbol starting with '-'
TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"[^"]*")'
    r"|(?P<number>-?[0-9]+(?:\.[0-9]*)?)"
    r"|(?P<symbol>[A-Za-z+\-*/=<>!][A-Za-z0-9_+\-*/=<>!]*)"
)


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0  # offset into source
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        return Position(self.line, self.column)

    def _advance_over(self, text: str) -> None:
        """Move past `text`, keeping line and column in step."""
        self.pos += len(text)
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)

    def skip_whitespace(self) -> None:
        start = self.pos
        end = start
        n = len(self.source)
        while end < n and self.source[end] in WHITESPACE:
            end += 1
        if end > start:
            self._advance_over(self.source[start:end])

    def next_token(self) -> Token:
        self.skip_whitespace()
        position = self.current_position()

        if self.pos >= len(self.source):
            return Token(TokenKind.EOF, "", position)

        match = TOKEN_RE.match(self.source, self.pos)
        if match is None:
            ch = self.source[self.pos]
            if ch == '"':
                raise UnterminatedString("unterminated string", position.line, position.column)
            raise UnexpectedCharacter(ch, position.line, position.column)

        kind = TokenKind(match.lastgroup)
        raw = match.group()
        self._advance_over(raw)
        text = raw[1:-1] if kind is TokenKind.STRING else raw
        return Token(kind, text, position)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()).kind is not TokenKind.EOF:
            yield token


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token of `source` up to, not including, EOF."""
    return iter(Lexer(source))
