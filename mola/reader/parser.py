"""
  Mola Reader: tokenizer and recursive-descent parser

- One regular expression splits the source into string tokens
- TokenStream is a plain list plus a read cursor
- Emits tagged Values (mola.types.value):

    - integers   -> Integer (literal text kept)
    - "..." '... -> String (raw text, quotes included)
    - nil        -> Nil
    - names      -> Symbol
    - (...)      -> List
    - ; comment  -> no form (None)
"""

from __future__ import annotations

import logging
import re
import string
from typing import Iterator, Optional

from mola import config
from mola.errors import (
    EndOfStream,
    NestingTooDeep,
    NoTokensFound,
    UnknownAtom,
    UnterminatedList,
)
from mola.types.nil import Nil
from mola.types.symbol import Symbol
from mola.types.value import Integer, List, String, Value

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # single special characters
    r'|"(?:\\.|[^\\"])*"?'  # double-quoted string, may be unterminated
    r"|;.*"  # comment to end of line
    r"|[^\s\[\]{}('\"`,;)]*"  # fallback: symbol characters
    r")"
)

INTEGER_RE = re.compile(r"-?[0-9]+")

SYMBOL_CHARS = frozenset(string.digits + string.ascii_letters + "!+-=/*")


def iter_tokens(source: str) -> Iterator[tuple[str, int, int]]:
    """Token generator: yields (token, start, end) for every non-empty token."""
    for m in TOKEN_RE.finditer(source):
        tok = m.group(1).strip()
        if tok:
            yield tok, m.start(1), m.end(1)


def tokenize(source: str, strict: bool = False) -> list[str]:
    """Split `source` into tokens.

    An empty or blank source gives an empty list; with `strict` it raises
    NoTokensFound instead.
    """
    tokens = [tok for tok, _, _ in iter_tokens(source)]
    if strict and not tokens:
        raise NoTokensFound()
    logger.debug("tokenized %d tokens: %r", len(tokens), tokens)
    return tokens


def is_integer(tok: str) -> bool:
    return INTEGER_RE.fullmatch(tok) is not None


def is_symbol(tok: str) -> bool:
    return all(c in SYMBOL_CHARS for c in tok)


class TokenStream:
    def __init__(self, tokens: list[str], max_depth: Optional[int] = None):
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth if max_depth is not None else config.get_max_depth()

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> str:
        if self.at_end():
            raise EndOfStream()
        return self.tokens[self.pos]

    def advance(self) -> str:
        tok = self.peek()
        self.pos += 1
        return tok

    def read_form(self, depth: int = 0) -> Optional[Value]:
        """Read one form, or return None when the next token is a comment."""
        tok = self.peek()
        if tok.startswith("("):
            return self.read_list(depth + 1)
        if tok.startswith(";"):
            self.advance()
            return None
        return self.read_atom()

    def read_list(self, depth: int) -> List:
        if depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)
        self.advance()  # consume "("
        items: list[Value] = []
        # every branch below consumes at least one token
        while True:
            try:
                tok = self.peek()
            except EndOfStream as err:
                raise UnterminatedList() from err
            if tok.startswith(")"):
                self.advance()
                return List(items)
            if tok.startswith(";"):
                self.advance()
                continue
            items.append(self.read_form(depth))

    def read_atom(self) -> Value:
        tok = self.advance()
        if is_integer(tok):
            return Integer(int(tok), tok)
        if tok[0] in "\"'":
            return String(tok)
        if tok == "nil":
            return Nil
        if is_symbol(tok):
            return Symbol(tok)
        raise UnknownAtom(tok)

    def parse_all(self) -> Iterator[Value]:
        """Yield every form left in the stream, skipping comments."""
        while not self.at_end():
            form = self.read_form()
            if form is not None:
                yield form


def read_str(source: str) -> Optional[Value]:
    """Read the first form of `source`.

    Returns None when there is nothing to read or the source starts with a
    comment. Tokens after the first form are left unread.
    """
    stream = TokenStream(tokenize(source))
    if stream.at_end():
        return None
    form = stream.read_form()
    logger.debug("read %r", form)
    return form
