from __future__ import annotations

"""
Static indexer for Kappa documents.

Nothing is evaluated. The lexer finds top-level (defun name ...) forms and the
parser reads the whole buffer once to report the first syntax error, so the
diagnostics match exactly what the interpreter would reject. Positions are
0-based, as the LSP expects.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from kappa.errors import KappaSyntaxError
from kappa.reader.lexer import Token, TokenKind, lex
from kappa.reader.parser import parse_all


@dataclass
class SymbolDef:
    name: str
    kind: str  # "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problem: Optional[SyntaxProblem] = None


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ &rest numbers)",
    "-": "(- number &rest numbers)",
    "*": "(* &rest numbers)",
    "/": "(/ number &rest numbers)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote expr)",
    "if": "(if cond then [else])",
    "lambda": "(lambda (params...) body)",
    "defun": "(defun name (params...) body)",
}


def _collect_definitions(text: str, idx: DocumentIndex) -> None:
    depth = 0
    prev: list[Optional[Token]] = [None, None]
    for tok in lex(text):
        if tok.kind is TokenKind.LPAREN:
            depth += 1
        elif tok.kind is TokenKind.RPAREN:
            depth = max(depth - 1, 0)
        elif (
            tok.kind is TokenKind.SYMBOL
            and depth == 1
            and prev[0] is not None and prev[0].kind is TokenKind.LPAREN
            and prev[1] is not None and prev[1].kind is TokenKind.SYMBOL
            and prev[1].text == "defun"
        ):
            idx.symbols[tok.text] = SymbolDef(
                name=tok.text,
                kind="function",
                line=tok.position.line - 1,
                col=tok.position.column - 1,
            )
        prev = [prev[1], tok]


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    try:
        _collect_definitions(text, idx)
        for _ in parse_all(text):
            pass
    except KappaSyntaxError as exc:
        idx.problem = SyntaxProblem(
            message=str(exc),
            line=(exc.line or 1) - 1,
            col=(exc.column or 1) - 1,
        )
    return idx


def word_at(text: str, line: int, character: int) -> Optional[str]:
    """Return the symbol-like word around a 0-based position, if any."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    line_text = lines[line]
    start = min(character, len(line_text))
    while start > 0 and line_text[start - 1] not in " \t()'\n\r":
        start -= 1
    end = character
    while end < len(line_text) and line_text[end] not in " \t()'\n\r":
        end += 1
    word = line_text[start:end]
    return word or None


def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    """Hover text for `word`: a signature, a defun location, or None."""
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if word in SPECIAL_FORM_SIGNATURES:
        return SPECIAL_FORM_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word} - {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    return None
