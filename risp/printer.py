"""Rendering of values and diagnostics.

Two textual forms exist:

- display():   what the shell prints for a result (``3``, ``true``, ``#:foo``,
               ``[1, 2]``).
- to_source(): canonical s-expression text that reads back to the same tree.
"""

from __future__ import annotations

from risp import LispValue, SExpression
from risp.errors import RispError, RispSyntaxError
from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable


def display(value: LispValue, table: SymbolTable) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Symbol):
        return f"#:{table.resolve(value)}"
    if isinstance(value, list):
        return "[" + ", ".join(display(v, table) for v in value) + "]"
    raise TypeError(f"Not a risp value: {value!r}")


def to_source(expr: SExpression, table: SymbolTable) -> str:
    if isinstance(expr, bool):
        return "#t" if expr else "#f"
    if isinstance(expr, int):
        return str(expr)
    if isinstance(expr, Symbol):
        return table.resolve(expr)
    if isinstance(expr, list):
        return "(" + " ".join(to_source(e, table) for e in expr) + ")"
    raise TypeError(f"Not a risp expression: {expr!r}")


def format_eval_error(err: RispError) -> str:
    return f"ERROR: {err}"


def format_syntax_error(err: RispSyntaxError) -> list[str]:
    # one diagnostic line per collected error
    return [e.message for e in err.errors]
