"""
  risp Parser

- Consumes the flat token stream produced by the tokenizer.
- Builds nested Python lists with an explicit stack of frames, no recursion.
- Emits Python primitives:

    - #t / #f            -> True / False
    - decimal integers   -> int (signed 64-bit range only)
    - other tokens       -> Symbol (the token handle itself)
    - ( ... )            -> list

- Structural errors never stop the parse. A stray ')' is reported and then
  ignored, open lists left at end of input are reported once as a count, and
  all errors are raised together in one RispSyntaxError.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from risp import SExpression, I64_MIN, I64_MAX
from risp.config import get_max_depth
from risp.errors import RispSyntaxError
from risp.reader.parse_errors import ParseError, UnmatchedCloser, UnmatchedOpeners, TooDeep
from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable


INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z", re.ASCII)


def parse_integer(text: str) -> Optional[int]:
    """Return the value of a base-10 signed 64-bit literal, or None."""
    if not INTEGER_RE.match(text):
        return None
    value = int(text)
    if value < I64_MIN or value > I64_MAX:
        return None
    return value


def parse(
    tokens: Iterable[Symbol],
    table: SymbolTable,
    max_depth: int | None = None,
) -> list[SExpression]:
    """Parse `tokens` into top-level expressions.

    Raises RispSyntaxError carrying every structural error found, in the order
    they were found. UnmatchedOpeners, when present, is always last.
    """
    if max_depth is None:
        max_depth = get_max_depth()

    stack: list[list[SExpression]] = []
    curr: list[SExpression] = []
    errors: list[ParseError] = []
    too_deep = False

    for symbol in tokens:
        if symbol == table.open_paren:
            stack.append(curr)
            curr = []
            if len(stack) > max_depth and not too_deep:
                too_deep = True
                errors.append(TooDeep(max_depth))
        elif symbol == table.close_paren:
            if stack:
                outer = stack.pop()
                outer.append(curr)
                curr = outer
            else:
                errors.append(UnmatchedCloser())
        elif symbol == table.true_symbol:
            curr.append(True)
        elif symbol == table.false_symbol:
            curr.append(False)
        else:
            num = parse_integer(table.resolve(symbol))
            curr.append(symbol if num is None else num)

    if stack:
        errors.append(UnmatchedOpeners(depth=len(stack)))

    if errors:
        # whatever structure survived travels with the errors
        raise RispSyntaxError(errors, partial=curr)
    return curr
