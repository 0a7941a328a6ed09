# Mola: a small Lisp core (read -> eval -> print).
#
# Every runtime datum is one of the tagged Value classes in mola.types.
# The three entry points a driver needs are re-exported here:
#
# - read(text)          -> Value, or None when the text holds no form
# - evaluate(ast, env)  -> Value
# - print_str(value)    -> str

from mola.interpreter import read, evaluate, print_str, Interpreter

__version__ = "0.1.0"

__all__ = ["read", "evaluate", "print_str", "Interpreter", "__version__"]
