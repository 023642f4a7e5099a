from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import RispArityError, RispNonBooleanConditionError
from risp.types.symbol_table import SymbolTable


def if_form(
    tail: list[SExpression],
    table: SymbolTable,
    evaluate_fn: EvaluatorFn,
    depth: int,
    max_depth: int,
) -> LispValue:
    # arity is checked before anything is evaluated
    if len(tail) != 3:
        raise RispArityError(f"Expected 3 args found {len(tail)} args")

    cond = evaluate_fn(tail[0], table, depth, max_depth)
    if not isinstance(cond, bool):
        raise RispNonBooleanConditionError("Non boolean condition to if statement")

    # only the selected branch is ever reduced
    branch = tail[1] if cond else tail[2]
    return evaluate_fn(branch, table, depth, max_depth)
