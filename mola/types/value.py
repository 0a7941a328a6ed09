"""Tagged runtime values for Mola.

Every datum the reader builds, the evaluator computes and the printer renders
is an instance of exactly one `Value` subclass:

    - List      -> ordered tuple of Values
    - Function  -> native Python callable (*Value) -> Value
    - Integer   -> int magnitude plus the literal text it was read from
    - Float     -> float
    - String    -> raw token text, quote characters included
    - Symbol    -> interned name (see mola.types.symbol)
    - Bool      -> flag stored as 0/1, only TRUE and FALSE exist
    - Nil       -> singleton (see mola.types.nil)

Values are immutable. Lists hold tuples, so a tree never shares mutable
structure with another tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Iterator


class Tag(Enum):
    LIST = "List"
    FUNCTION = "Function"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    SYMBOL = "Symbol"
    BOOL = "Bool"
    NIL = "Nil"

    @property
    def label(self) -> str:
        return self.value


class Value:
    """Base of the closed value family. Not instantiated directly."""

    __slots__ = ()
    tag: ClassVar[Tag]


@dataclass(frozen=True, slots=True)
class List(Value):
    tag: ClassVar[Tag] = Tag.LIST

    items: tuple[Value, ...] = ()

    def __post_init__(self):
        # accept any iterable, always store a tuple
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: Value) -> List:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class Function(Value):
    tag: ClassVar[Tag] = Tag.FUNCTION

    fn: Callable[..., Value]
    name: str = "<native>"

    def __call__(self, *args: Value) -> Value:
        return self.fn(*args)

    def __repr__(self):
        return f"Function({self.name!r})"


@dataclass(frozen=True, slots=True)
class Integer(Value):
    tag: ClassVar[Tag] = Tag.INTEGER

    value: int
    # literal text from the source; not part of equality
    text: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.text:
            object.__setattr__(self, "text", str(self.value))
            return
        try:
            parsed = int(self.text)
        except ValueError:
            parsed = None
        if parsed != self.value:
            raise ValueError(f"integer text {self.text!r} does not spell {self.value}")

    @classmethod
    def of(cls, value: int) -> Integer:
        return cls(value, str(value))


@dataclass(frozen=True, slots=True)
class Float(Value):
    tag: ClassVar[Tag] = Tag.FLOAT

    value: float


@dataclass(frozen=True, slots=True)
class String(Value):
    tag: ClassVar[Tag] = Tag.STRING

    text: str


@dataclass(frozen=True, slots=True)
class Bool(Value):
    tag: ClassVar[Tag] = Tag.BOOL

    flag: int

    def __new__(cls, flag: int):
        # only the TRUE and FALSE instances ever exist
        if flag not in (0, 1):
            raise ValueError(f"Bool flag must be 0 or 1, got {flag!r}")
        cached = _BOOLS.get(int(flag))
        if cached is None:
            cached = _BOOLS[int(flag)] = object.__new__(cls)
        return cached

    def __post_init__(self):
        object.__setattr__(self, "flag", int(self.flag))

    @classmethod
    def of(cls, flag: bool | int) -> Bool:
        return TRUE if flag else FALSE

    def __bool__(self) -> bool:
        return self.flag == 1

    def __repr__(self):
        return "Bool(true)" if self.flag else "Bool(false)"


_BOOLS: dict[int, Bool] = {}

TRUE = Bool(1)
FALSE = Bool(0)
