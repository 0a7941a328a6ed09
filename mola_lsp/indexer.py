from __future__ import annotations

"""
Lightweight indexer for Mola source files without evaluating code.

The document is run through the real tokenizer and reader so that every
problem the REPL would report as a syntax error is found here too, with
the position of the offending token. We also record the head symbol of each
top-level list to power document symbols, hover and completion.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from mola.errors import MolaSyntaxError, NestingTooDeep, UnknownAtom
from mola.reader.parser import TokenStream, iter_tokens
from mola.types.symbol import Symbol
from mola.types.value import List as ListValue


@dataclass
class SymbolRef:
    name: str
    line: int
    col: int


@dataclass
class ReaderProblem:
    message: str
    line: int
    col: int
    length: int


@dataclass
class DocumentIndex:
    heads: List[SymbolRef] = field(default_factory=list)
    problems: List[ReaderProblem] = field(default_factory=list)
    paren_balance: int = 0
    form_count: int = 0

    def head_names(self) -> set[str]:
        return {h.name for h in self.heads}


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _error_token(err: MolaSyntaxError, stream: TokenStream) -> int:
    """Index of the token an error should be reported at."""
    last = len(stream.tokens) - 1
    if isinstance(err, UnknownAtom):
        # the bad token has already been consumed
        return stream.pos - 1
    if isinstance(err, NestingTooDeep):
        return min(stream.pos, last)
    # running out of tokens: point at the last one
    return last


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    spans = list(iter_tokens(text))
    tokens = [tok for tok, _, _ in spans]

    for tok in tokens:
        if tok == "(":
            idx.paren_balance += 1
        elif tok == ")":
            idx.paren_balance -= 1

    stream = TokenStream(tokens)
    while not stream.at_end():
        start = stream.pos
        try:
            form = stream.read_form()
        except MolaSyntaxError as err:
            i = _error_token(err, stream)
            tok, s, e = spans[i]
            line, col = _position_from_offset(text, s)
            idx.problems.append(ReaderProblem(str(err), line, col, e - s))
            # the reader cannot resynchronise after an error
            break
        if form is None:
            continue
        idx.form_count += 1
        head = _head_symbol(form)
        if head is None:
            continue
        for k in range(start + 1, stream.pos):
            if tokens[k] == head:
                line, col = _position_from_offset(text, spans[k][1])
                idx.heads.append(SymbolRef(head, line, col))
                break
    return idx


def _head_symbol(form) -> Optional[str]:
    if isinstance(form, ListValue) and form.items and isinstance(form.items[0], Symbol):
        return form.items[0].name
    return None
