from __future__ import annotations

from mola.types.value import Tag, Value


class NilType(Value):
    __slots__ = ()
    tag = Tag.NIL

    _instance: NilType | None = None

    def __new__(cls):
        # only one Nil ever exists
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
