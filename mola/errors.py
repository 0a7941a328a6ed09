from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mola.types.value import Tag


class MolaError(Exception):
    """ Base class for all Mola errors"""
    pass


# ----------------- Reader -----------------
class MolaSyntaxError(MolaError):
    """ Raised when source text cannot be turned into a form"""


class NoTokensFound(MolaSyntaxError):
    """ Raised by a strict tokenize when the source holds no tokens"""

    def __init__(self):
        super().__init__("no tokens found")


class EndOfStream(MolaSyntaxError):
    """ Raised when the token cursor is peeked or advanced past its end"""

    def __init__(self):
        super().__init__("reader token stream empty")


class UnterminatedList(MolaSyntaxError):
    """ Raised when the token stream ends before a list's closing paren"""

    def __init__(self):
        super().__init__('")" missing in list declaration; unexpectedly found end of token stream')


class UnknownAtom(MolaSyntaxError):
    """ Raised when a token is neither a number, string, nil nor symbol"""

    def __init__(self, token: str):
        super().__init__(f'unknown atomic type token: "{token}"')
        self.token = token


class NestingTooDeep(MolaSyntaxError):
    """ Raised when lists nest deeper than the configured limit"""

    def __init__(self, limit: int):
        super().__init__(f"lists nested deeper than {limit} levels")
        self.limit = limit


# ----------------- Evaluator -----------------
class MolaEvalError(MolaError):
    """ Raised when a form cannot be evaluated"""


class NilEnvironment(MolaEvalError):
    """ Raised when evaluation is attempted without an environment"""

    def __init__(self):
        super().__init__("nil env provided")


class UnboundSymbol(MolaEvalError):
    """ Raised when a symbol has no binding in the environment"""

    def __init__(self, name: str):
        super().__init__(f'symbol "{name}" definition not found in environment')
        self.name = name


class TypeMismatch(MolaEvalError):
    """ Raised when a built-in receives arguments of differing types"""

    def __init__(self, op: str, left: Tag, right: Tag):
        super().__init__(
            f'internal operator "{op}" called with mismatched types: "{left.label}" and "{right.label}"'
        )
        self.op = op
        self.left = left
        self.right = right


class UnsupportedOperation(MolaEvalError):
    """ Raised when a built-in has no rule for its argument type"""

    def __init__(self, op: str, tag: Tag):
        super().__init__(f'unsupported operation "{op}" on type "{tag.label}"')
        self.op = op
        self.tag = tag


class DivisionByZero(MolaEvalError):
    """ Raised when a divisor is zero"""

    def __init__(self, op: str):
        super().__init__("division by zero error")
        self.op = op


class NoArguments(MolaEvalError):
    """ Raised when a variadic built-in is called with no arguments"""

    def __init__(self, op: str):
        super().__init__(f"internal {op} called with no-args")
        self.op = op


# ----------------- Printer -----------------
class MolaPrintError(MolaError):
    """ Raised when a value cannot be rendered as text"""


class NoRepresentation(MolaPrintError):
    """ Raised when a value's type has no textual form"""

    def __init__(self, tag: Tag):
        super().__init__(f'no string representation logic for type "{tag.label}"')
        self.tag = tag
