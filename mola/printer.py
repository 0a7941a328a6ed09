"""Printer: renders Values back to their textual form."""

from __future__ import annotations

from mola.errors import NoRepresentation
from mola.types.nil import NilType
from mola.types.symbol import Symbol
from mola.types.value import Integer, List, String, Value


def pr_str(value: Value) -> str:
    match value:
        case Symbol():
            return value.name
        case Integer():
            return str(value.value)
        case List():
            return "(" + " ".join(pr_str(item) for item in value.items) + ")"
        case NilType():
            return "nil"
        case String():
            return value.text
    # Float, Bool and Function have no textual form
    raise NoRepresentation(value.tag)
