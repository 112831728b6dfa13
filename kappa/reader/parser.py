"""
  Kappa Reader (Parser)

- Recursive descent over the lexer's tokens with one token of lookahead
- Builds Cons cells; never evaluates anything:

    - numbers -> float
    - strings -> str
    - t -> True
    - nil -> Nil
    - other symbols -> Symbol
    - lists -> chains of Cons cells ending in Nil, () -> Nil
    - 'x -> (quote x)
"""

from __future__ import annotations

from typing import Iterator

from kappa import SExpression
from kappa.errors import (
    InvalidNumberLiteral,
    UnexpectedCloseParen,
    UnexpectedEndOfInput,
    UnterminatedList,
)
from kappa.reader.lexer import Lexer, Token, TokenKind
from kappa.types.cons import Cons
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol

QUOTE = Symbol("quote")


class TokenStream:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        # Load the first token of lookahead
        self.current: Token = self.lexer.next_token()

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(Lexer(source))

    def advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.current
        self.current = self.lexer.next_token()
        return token

    def at_end(self) -> bool:
        return self.current.kind is TokenKind.EOF

    def parse_expr(self) -> SExpression:
        token = self.current
        match token.kind:
            case TokenKind.NUMBER:
                try:
                    value = float(token.text)
                except ValueError:
                    raise InvalidNumberLiteral(
                        f"invalid number: {token.text}", token.position.line, token.position.column
                    ) from None
                self.advance()
                return value

            case TokenKind.STRING:
                self.advance()
                return token.text

            case TokenKind.SYMBOL:
                self.advance()
                if token.text == "t":
                    return True
                if token.text == "nil":
                    return Nil
                return Symbol(token.text)

            case TokenKind.LPAREN:
                return self.parse_list()

            case TokenKind.RPAREN:
                raise UnexpectedCloseParen(
                    "unexpected ')'", token.position.line, token.position.column
                )

            case TokenKind.QUOTE:
                self.advance()
                expr = self.parse_expr()
                return Cons(QUOTE, Cons(expr, Nil))

            case TokenKind.EOF:
                raise UnexpectedEndOfInput(
                    "unexpected end of input", token.position.line, token.position.column
                )

        raise AssertionError(f"unhandled token kind {token.kind}")

    def parse_list(self) -> SExpression:
        open_paren = self.advance()  # consume '('

        if self.current.kind is TokenKind.RPAREN:
            self.advance()
            return Nil

        head: Cons | None = None
        tail: Cons | None = None
        while self.current.kind not in (TokenKind.RPAREN, TokenKind.EOF):
            cell = Cons(self.parse_expr(), Nil)
            if tail is None:
                head = cell
            else:
                tail.cdr = cell
            tail = cell

        if self.current.kind is TokenKind.EOF:
            raise UnterminatedList(
                "expected ')' before end of input",
                open_paren.position.line,
                open_paren.position.column,
            )
        self.advance()  # consume ')'
        return head if head is not None else Nil

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse_one(source: str) -> SExpression:
    """Parse exactly one expression from `source`; anything after it is left unread."""
    return TokenStream.from_source(source).parse_expr()


def parse_all(source: str) -> Iterator[SExpression]:
    """Parse every top-level expression in `source`, in order."""
    return TokenStream.from_source(source).parse_all()
