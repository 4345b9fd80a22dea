from __future__ import annotations

import logging
from typing import Mapping

from wyas.errors import render_error
from wyas.evaluation.evaluator import evaluate
from wyas.evaluation.primitives import PRIMITIVES, PrimitiveFn
from wyas.printer import render
from wyas.reader.parser import parse
from wyas.types.result import Result
from wyas.types.values import LispValue

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates one Wyas expression per call.
    Holds only the (read-only) primitive table, so a single instance can be
    shared between threads.
    """

    def __init__(self, primitives: Mapping[str, PrimitiveFn] | None = None):
        self.primitives: Mapping[str, PrimitiveFn] = PRIMITIVES if primitives is None else primitives

    def read(self, source: str) -> Result[LispValue]:
        return parse(source)

    def eval(self, source: str) -> Result[LispValue]:
        logger.debug("evaluating %r", source)
        result = parse(source).bind(lambda value: evaluate(value, self.primitives))
        if result.is_err():
            logger.debug("failed with %s", type(result.error).__name__)
        return result

    def eval_to_string(self, source: str) -> str:
        """Render the value, or the error message, of evaluating ``source``."""
        return show_result(self.eval(source))

    def read_expr(self, source: str) -> str:
        return show_read(self.read(source))


def show_result(result: Result[LispValue]) -> str:
    return result.fold(render_error, render)


def show_read(result: Result[LispValue]) -> str:
    return result.fold(
        lambda error: f"No match: {render_error(error)}",
        lambda value: f"Found value: {render(value)}",
    )
