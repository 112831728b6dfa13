"""Kappa Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for the Kappa Lisp dialect.
- A static indexer that runs the real lexer and parser over a document without
  evaluating it.
- A simple TCP REPL server to evaluate code via the Interpreter.
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
