import pytest

from mola import read, print_str
from mola.errors import DivisionByZero, NilEnvironment, UnboundSymbol
from mola.evaluation.evaluator import evaluate
from mola.interpreter import Interpreter
from mola.types.environment import Environment
from mola.types.nil import Nil
from mola.types.symbol import Symbol
from mola.types.value import FALSE, TRUE, Bool, Float, Function, Integer, List, String


# -----------------------------------------------------
# Helpers
# -----------------------------------------------------

def run(source, env):
    return evaluate(read(source), env)


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [Integer.of(1), Float(3.14), String('"hello"'), Nil, TRUE, FALSE, List()],
)
def test_self_evaluating(env, value):
    assert evaluate(value, env) is value


def test_function_value_is_self_evaluating(env):
    fn = env.lookup("+")
    assert evaluate(fn, env) is fn


def test_symbol_lookup(env):
    env.define("x", Integer.of(42))
    assert evaluate(Symbol("x"), env) == Integer.of(42)
    with pytest.raises(UnboundSymbol) as info:
        evaluate(Symbol("z"), env)
    assert info.value.name == "z"


def test_nil_environment():
    with pytest.raises(NilEnvironment):
        evaluate(Integer.of(1), None)


def test_unbound_head(env):
    with pytest.raises(UnboundSymbol) as info:
        run("(foo 1 2)", env)
    assert info.value.name == "foo"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(1 2 3)", "(1 2 3)"),
        ("()", "()"),
        ("(nil 1)", "(nil 1)"),
        ('("a" "b")', '("a" "b")'),
        ("((+ 1 2) 4)", "(3 4)"),
        ("(1 (+ 1 1) (* 3 1))", "(1 2 3)"),
        ("(+ 1 (* 2 3))", "7"),
    ]
)
def test_lists(env, source, expected):
    assert print_str(run(source, env)) == expected


def test_self_quoting_list_with_symbol_elements(env):
    env.define("x", Integer.of(5))
    assert print_str(run("(1 x)", env)) == "(1 5)"


def test_arguments_evaluated_left_to_right(env):
    # the unbound head fails before the division is reached
    with pytest.raises(UnboundSymbol):
        run("(foo (/ 1 0))", env)
    with pytest.raises(DivisionByZero):
        run("(1 (/ 1 0) foo)", env)


def test_native_function_application(env):
    calls = []

    def collect(*args):
        calls.append(args)
        return List(args)

    env.define("list", Function(collect, "list"))
    assert print_str(run("(list 1 (+ 1 1) nil)", env)) == "(1 2 nil)"
    assert calls == [(Integer.of(1), Integer.of(2), Nil)]


def test_evaluation_does_not_mutate_env(env):
    before = dict(env)
    run("(+ 1 2)", env)
    run("(1 2 3)", env)
    assert dict(env) == before


def test_string_concatenation(env):
    assert run('(+ "hello" "world")', env) == String('"helloworld"')
    assert print_str(run('(+ "a" "b" "c")', env)) == '"abc"'


def test_environment_mapping_interface():
    env = Environment({"a": Integer.of(1)})
    env.define(Symbol("b"), Integer.of(2))
    assert "a" in env
    assert Symbol("b") in env
    assert 3 not in env
    assert len(env) == 2
    assert env["b"] == Integer.of(2)
    assert sorted(env) == ["a", "b"]


def test_interpreters_do_not_share_bindings():
    first, second = Interpreter(), Interpreter()
    first.env.define("x", Integer.of(1))
    assert first.rep("x") == "1\n"
    assert second.rep("x").startswith("Eval error: ")


def test_bool_only_true_and_false():
    assert Bool(1) is TRUE
    assert Bool(0) is FALSE
    assert Bool.of(True) is TRUE
    with pytest.raises(ValueError):
        Bool(2)


@pytest.mark.parametrize("text", ["abc", "6", "5.0"])
def test_integer_text_must_spell_value(text):
    with pytest.raises(ValueError):
        Integer(5, text)


def test_integer_text_keeps_literal():
    assert Integer(1, "01").text == "01"
    assert Integer(-3).text == "-3"
    assert Integer(1, "01") == Integer.of(1)
