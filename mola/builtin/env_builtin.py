"""Built-in functions for the Mola runtime environment.

The four variadic arithmetic operators. Each takes the type of its first
argument as the type every other argument must have, then folds left to
right starting from the first argument.
"""
from __future__ import annotations

from typing import Callable

from mola.errors import DivisionByZero, NoArguments, TypeMismatch, UnsupportedOperation
from mola.types.environment import Environment
from mola.types.value import Float, Function, Integer, String, Tag, Value

# step(op_name, accumulator, operand) -> new accumulator
Step = Callable[[str, Value, Value], Value]


def _fold(op: str, args: tuple[Value, ...], step: Step) -> Value:
    if not args:
        raise NoArguments(op)
    acc = args[0]
    tag = acc.tag
    for arg in args[1:]:
        if arg.tag is not tag:
            raise TypeMismatch(op, tag, arg.tag)
        acc = step(op, acc, arg)
    return acc


def _numeric(fn: Callable) -> Step:
    """Lift a binary function on Python numbers to Integer/Float values."""
    def step(op: str, acc: Value, arg: Value) -> Value:
        match acc, arg:
            case Integer(), Integer():
                return Integer.of(fn(op, acc.value, arg.value))
            case Float(), Float():
                return Float(fn(op, acc.value, arg.value))
        raise UnsupportedOperation(op, acc.tag)
    return step


def _trunc_div(a: int, b: int) -> int:
    # integer division rounds toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _divide(op: str, a, b):
    if b == 0:
        raise DivisionByZero(op)
    if isinstance(a, int):
        return _trunc_div(a, b)
    return a / b


_add_numbers = _numeric(lambda op, a, b: a + b)


def _add_step(op: str, acc: Value, arg: Value) -> Value:
    if acc.tag is Tag.STRING:
        # drop quotes so "hello" + "world" gives "helloworld" and not "hello""world"
        return String(acc.text[:-1] + arg.text[1:])
    return _add_numbers(op, acc, arg)


_sub_step = _numeric(lambda op, a, b: a - b)
_mul_step = _numeric(lambda op, a, b: a * b)
_div_step = _numeric(_divide)


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: Value) -> Value:
    """Sum numbers, or concatenate strings."""
    return _fold("add", args, _add_step)


def sub(*args: Value) -> Value:
    return _fold("sub", args, _sub_step)


def mul(*args: Value) -> Value:
    return _fold("mul", args, _mul_step)


def div(*args: Value) -> Value:
    """Divide left to right; integers truncate toward zero."""
    return _fold("div", args, _div_step)


BUILTINS: dict[str, Function] = {
    "+": Function(add, "+"),
    "-": Function(sub, "-"),
    "*": Function(mul, "*"),
    "/": Function(div, "/"),
}

# Short descriptions used by the language server
BUILTIN_SIGNATURES: dict[str, str] = {
    "+": "(+ x y ...) -> sum of Integers or Floats, or concatenation of Strings",
    "-": "(- x y ...) -> x minus each following Integer or Float",
    "*": "(* x y ...) -> product of Integers or Floats",
    "/": "(/ x y ...) -> x divided by each following Integer or Float",
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment):
    env.update(BUILTINS)
