from __future__ import annotations
import sys

from mola.types.value import Tag, Value


class Symbol(Value):
    __slots__ = ("name",)
    tag = Tag.SYMBOL

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
