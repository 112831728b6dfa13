from __future__ import annotations


class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass


# ---------------------------------------------------------------------------
# Reader errors
# ---------------------------------------------------------------------------

class KappaSyntaxError(KappaError):
    """ Raised when source text cannot be tokenized or parsed"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None and column is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)
        self.line = line
        self.column = column


class UnterminatedString(KappaSyntaxError):
    """ Raised when input ends inside a string literal"""


class UnexpectedCharacter(KappaSyntaxError):
    """ Raised when the lexer meets a character that starts no token"""

    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"unexpected character: {char!r}", line, column)
        self.char = char


class UnexpectedCloseParen(KappaSyntaxError):
    """ Raised when ')' appears where an expression should start"""


class UnexpectedEndOfInput(KappaSyntaxError):
    """ Raised when input ends where an expression should start"""


class UnterminatedList(KappaSyntaxError):
    """ Raised when input ends before a list is closed"""


class InvalidNumberLiteral(KappaSyntaxError):
    """ Raised when a number token cannot be converted to a float"""


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class KappaEvalError(KappaError):
    """ Base class for errors raised while evaluating"""


class KappaUnboundSymbol(KappaEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"undefined variable: {name}")
        self.name = name


class KappaTypeError(KappaEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class KappaNotCallable(KappaTypeError):
    """ Raised when a non-function value is applied"""


class KappaArityError(KappaEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class KappaDivisionByZero(KappaEvalError, ZeroDivisionError):
    """ Raised when / meets a zero divisor"""


class KappaMalformedForm(KappaEvalError):
    """ Raised when a special form or argument list has the wrong shape"""
