"""Core evaluator for the Mola interpreter.

Symbols are looked up in the environment, lists are evaluated element by
element and applied when their head is a Function, and every other value
evaluates to itself. There are no special forms.

Recursion depth follows list nesting, which the reader bounds
(see mola.config.get_max_depth).
"""

from __future__ import annotations

import logging
from typing import Optional

from mola.errors import NilEnvironment
from mola.types.environment import Environment
from mola.types.symbol import Symbol
from mola.types.value import Function, List, Value

logger = logging.getLogger(__name__)


def evaluate(ast: Value, env: Optional[Environment]) -> Value:
    if env is None:
        raise NilEnvironment()

    match ast:
        case Symbol():
            return env.lookup(ast)

        case List(items=items) if items:
            evaluated = [evaluate(item, env) for item in items]
            head, *args = evaluated
            # Non-function head: the list quotes itself.
            if not isinstance(head, Function):
                return List(evaluated)
            logger.debug("apply %s to %r", head.name, args)
            return head(*args)

    # --- Atoms and the empty list return as-is ---
    return ast
