import pytest

from mola import read, print_str
from mola.builtin.env_builtin import BUILTINS
from mola.errors import NoRepresentation
from mola.types.nil import Nil
from mola.types.symbol import Symbol
from mola.types.value import FALSE, TRUE, Float, Integer, List, String, Tag


@pytest.mark.parametrize(
    "value,expected",
    [
        (Symbol("foo"), "foo"),
        (Integer.of(-12), "-12"),
        (Integer(7, "007"), "7"),
        (Nil, "nil"),
        (String('"hi there"'), '"hi there"'),
        (String('"unterminated'), '"unterminated'),
        (List(), "()"),
        (List.of(Integer.of(1), List.of(Symbol("a"), Nil), String('"s"')), '(1 (a nil) "s")'),
    ]
)
def test_print(value, expected):
    assert print_str(value) == expected


@pytest.mark.parametrize(
    "value,tag",
    [
        (Float(1.5), Tag.FLOAT),
        (TRUE, Tag.BOOL),
        (FALSE, Tag.BOOL),
        (BUILTINS["+"], Tag.FUNCTION),
        (List.of(Integer.of(1), Float(2.0)), Tag.FLOAT),
    ]
)
def test_no_representation(value, tag):
    with pytest.raises(NoRepresentation) as info:
        print_str(value)
    assert info.value.tag is tag


@pytest.mark.parametrize("source", ["42", "nil", "foo", '"s"', "(1 (2 3) nil)"])
def test_read_print_round_trip(source):
    assert print_str(read(source)) == source


def test_printing_is_idempotent():
    value = read('(a "b" (1 2) nil)')
    assert print_str(value) == print_str(value)
