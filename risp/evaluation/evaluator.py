"""Core evaluator for risp.

Atoms evaluate to themselves. A list is a call: its head is evaluated first
and must reduce to a well-known operator symbol. Special forms (``if``) get
their arguments unevaluated; operators (``+ - * /``) get them evaluated left
to right. The first error aborts the whole expression.
"""

from __future__ import annotations

from risp import SExpression, LispValue
from risp.config import get_max_depth
from risp.errors import (
    RispEmptyCallError,
    RispNonSymbolHeadError,
    RispTooDeepError,
    RispUnknownOperatorError,
)
from risp.evaluation.operators import OPERATORS
from risp.evaluation.special_forms import SPECIAL_FORMS
from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable


def evaluate(
    expr: SExpression,
    table: SymbolTable,
    depth: int = 0,
    max_depth: int | None = None,
) -> LispValue:
    """Reduce `expr` to a value.

    `depth` is the number of enclosing lists already being evaluated; lists
    nested `max_depth` or more levels deep raise RispTooDeepError.
    """
    if max_depth is None:
        max_depth = get_max_depth()

    if not isinstance(expr, list):
        # numbers, booleans and bare symbols are self-evaluating
        return expr

    if depth >= max_depth:
        raise RispTooDeepError(f"Expression nested deeper than {max_depth} levels")

    match expr:
        case []:
            raise RispEmptyCallError("calling empty list")
        case [head, *tail]:
            op = evaluate(head, table, depth + 1, max_depth)
            if not isinstance(op, Symbol):
                raise RispNonSymbolHeadError("Nonsymbol in head position: Cannot call")

            name = table.well_known_name(op)
            if name in SPECIAL_FORMS:
                return SPECIAL_FORMS[name](tail, table, evaluate, depth + 1, max_depth)
            if name in OPERATORS:
                args = [evaluate(arg, table, depth + 1, max_depth) for arg in tail]
                return OPERATORS[name](table, args)

            raise RispUnknownOperatorError(f"Unknown op: {table.resolve(op)}")
