from __future__ import annotations

import logging
from typing import Optional

from mola.errors import MolaEvalError, MolaPrintError, MolaSyntaxError
from mola.reader.parser import TokenStream, read_str, tokenize
from mola.evaluation.evaluator import evaluate
from mola.printer import pr_str
from mola.types.environment import Environment
from mola.types.value import Value
from mola.builtin.env_builtin import register

logger = logging.getLogger(__name__)

__all__ = ["read", "evaluate", "print_str", "Interpreter"]


def read(text: str) -> Optional[Value]:
    """Read one form from `text`; None means the input held no form."""
    return read_str(text)


def print_str(value: Value) -> str:
    return pr_str(value)


class Interpreter:
    """
    Driver-side helper: owns an Environment with the built-ins bound and
    turns one line of input into one line of output.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def rep(self, line: str) -> str:
        """Read, evaluate and print `line`. Errors become the output text.

        Returns "" when the line held no form (blank or comment).
        """
        try:
            form = read(line)
        except MolaSyntaxError as e:
            return f"Syntax error: {e}\n"
        if form is None:
            return ""
        return self._eval_print(form)

    def run_source(self, text: str) -> list[str]:
        """Evaluate every form in `text`, returning one output line per form.

        A syntax error stops reading; forms before it are still evaluated.
        """
        stream = TokenStream(tokenize(text))
        outputs: list[str] = []
        try:
            for form in stream.parse_all():
                outputs.append(self._eval_print(form))
        except MolaSyntaxError as e:
            outputs.append(f"Syntax error: {e}\n")
        return outputs

    def _eval_print(self, form: Value) -> str:
        try:
            result = evaluate(form, self.env)
        except MolaEvalError as e:
            logger.debug("eval failed for %r: %s", form, e)
            return f"Eval error: {e}\n"
        try:
            return print_str(result) + "\n"
        except MolaPrintError as e:
            return f"String representation error: {e}\n"
