"""Kappa reader: source text to tokens to S-expressions."""

from kappa.reader.lexer import Lexer, Position, Token, TokenKind, lex
from kappa.reader.parser import TokenStream, parse_all, parse_one

__all__ = [
    "Lexer",
    "Position",
    "Token",
    "TokenKind",
    "lex",
    "TokenStream",
    "parse_all",
    "parse_one",
]
