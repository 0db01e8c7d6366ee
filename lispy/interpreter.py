from __future__ import annotations

import logging
from typing import Iterable, Iterator

from lispy.builtin.env_builtin import register
from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.printer import render
from lispy.reader.ast import count_nodes
from lispy.reader.parser import parse
from lispy.reader.translate import read
from lispy.types.environment import Environment
from lispy.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lispy input one line at a time.
    Keeps a single Environment alive so definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    @property
    def running(self) -> bool:
        """False once `exit` has been evaluated."""
        return self.env.run

    def read(self, code: str, filename: str = "<stdin>") -> Value:
        """Parse `code` into an S-expression holding every top-level expression."""
        tree = parse(code, filename)
        logger.debug("parsed %r into %d nodes", code, count_nodes(tree))
        return read(tree)

    def eval(self, code: str, filename: str = "<stdin>") -> Value:
        """Evaluate one input. Raises LispySyntaxError if it does not parse."""
        result = evaluate(self.read(code, filename), self.env)
        logger.debug("evaluated %r to %r", code, result)
        return result

    def render(self, value: Value) -> str:
        return render(value, self.env)

    def eval_to_str(self, code: str, filename: str = "<stdin>") -> str:
        return self.render(self.eval(code, filename))

    def run_lines(self, lines: Iterable[str], filename: str = "<stdin>") -> Iterator[str]:
        """Evaluate each non-blank line as a separate input, stopping at `exit`.

        Yields the rendered result of each line. A LispySyntaxError carries
        the line number within `lines`.
        """
        for lineno, line in enumerate(lines, 1):
            if not self.running:
                break
            if not line.strip():
                continue
            try:
                yield self.eval_to_str(line, filename)
            except LispySyntaxError as e:
                e.line = lineno
                raise
