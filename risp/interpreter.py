from __future__ import annotations

import logging

from risp import SExpression, LispValue
from risp.config import clamp_max_depth, get_max_depth
from risp.errors import RispEvalError, RispSyntaxError, RispTooDeepError
from risp.evaluation.evaluator import evaluate
from risp.printer import display, format_eval_error, format_syntax_error
from risp.reader.parser import parse
from risp.reader.tokenizer import tokenize
from risp.types.symbol_table import SymbolTable

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating risp code, one line at a time.
    Owns the SymbolTable shared by the tokenizer, parser and evaluator.
    Nothing else survives from one line to the next.
    """

    def __init__(self, table: SymbolTable | None = None, max_depth: int | None = None):
        self.table: SymbolTable = table if table is not None else SymbolTable()
        # raises ValueError for non-positive limits, caps the rest below the host stack
        self.max_depth: int = clamp_max_depth(max_depth) if max_depth is not None else get_max_depth()

    def read(self, line: str) -> list[SExpression]:
        """Tokenize and parse `line`. Raises RispSyntaxError."""
        tokens = tokenize(line, self.table)
        return parse(tokens, self.table, self.max_depth)

    def evaluate(self, expr: SExpression) -> LispValue:
        try:
            return evaluate(expr, self.table, 0, self.max_depth)
        except RecursionError:
            # host stack ran out before the nesting limit did
            raise RispTooDeepError(f"Expression nested deeper than {self.max_depth} levels") from None

    def eval(self, line: str) -> list[LispValue]:
        """Evaluate every top-level expression of `line`, raising on the first error."""
        return [self.evaluate(expr) for expr in self.read(line)]

    def run_line(self, line: str) -> list[str]:
        """Evaluate `line` and return the lines a shell should print.

        Parse errors yield one line each and nothing is evaluated. Otherwise
        each top-level expression yields its rendered value or an ERROR line,
        independently of its siblings.
        """
        try:
            exprs = self.read(line)
        except RispSyntaxError as err:
            logger.debug("parse failed for %r: %s", line, err)
            return format_syntax_error(err)

        output: list[str] = []
        for expr in exprs:
            try:
                value = self.evaluate(expr)
            except RispEvalError as err:
                logger.debug("evaluation failed: %s", err)
                output.append(format_eval_error(err))
            else:
                output.append(display(value, self.table))
        return output
