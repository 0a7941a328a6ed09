"""Runtime environment for Mola.

The Environment is a flat table from symbol names to Values. The driver owns
it, fills it (see mola.builtin.env_builtin.register) and hands it to the
evaluator, which only ever reads from it. Each Interpreter gets its own, so
independent sessions never see each other's bindings.
"""

from __future__ import annotations

from collections.abc import Mapping
from io import StringIO
from typing import Iterator, Optional

from mola.errors import UnboundSymbol
from mola.types.symbol import Symbol
from mola.types.value import Value


def _key(name: Symbol | str) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment(Mapping):
    """Flat mapping from symbol names to Mola values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self.vars: dict[str, Value] = {}
        if bindings:
            self.update(bindings)

    def define(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` to `value`, replacing any earlier binding."""
        self.vars[_key(name)] = value

    def update(self, mapping: Mapping[str, Value]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def lookup(self, name: Symbol | str) -> Value:
        """Look up the value bound to `name`.

        Raises UnboundSymbol if not found.
        """
        key = _key(name)
        try:
            return self.vars[key]
        except KeyError:
            raise UnboundSymbol(key) from None

    def __getitem__(self, name: Symbol | str) -> Value:
        return self.vars[_key(name)]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (Symbol, str)):
            return _key(name) in self.vars
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
