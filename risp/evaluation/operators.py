"""Arithmetic operators.

Each operator receives the symbol table and its already evaluated arguments,
left to right, and returns a Number. Arithmetic is signed 64-bit: any result
outside that range raises RispOverflowError instead of growing.
"""

from __future__ import annotations

from typing import Any, Callable

from risp import LispValue, I64_MIN, I64_MAX
from risp.errors import (
    RispArityError,
    RispEmptyCallError,
    RispOverflowError,
    RispTypeError,
    RispZeroDivisionError,
)
from risp.types.symbol_table import SymbolTable


def is_number(value: Any) -> bool:
    # bool is an int subclass but is not a Number
    return isinstance(value, int) and not isinstance(value, bool)


def _number(op: str, value: LispValue) -> int:
    if not is_number(value):
        raise RispTypeError(f"Non number elem in math call to {op}")
    return value


def _checked(op: str, value: int) -> int:
    if value < I64_MIN or value > I64_MAX:
        raise RispOverflowError(f"Integer overflow in {op}")
    return value


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(table: SymbolTable, args: list[LispValue]) -> int:
    result = 0
    for x in args:
        result = _checked("+", result + _number("+", x))
    return result

def sub(table: SymbolTable, args: list[LispValue]) -> int:
    if not args:
        raise RispArityError("- requires at least 1 argument")
    if len(args) == 1:
        if not is_number(args[0]):
            raise RispTypeError("Cannot negate a non-number")
        return _checked("-", -args[0])
    result = _number("-", args[0])
    for x in args[1:]:
        result = _checked("-", result - _number("-", x))
    return result

def mul(table: SymbolTable, args: list[LispValue]) -> int:
    result = 1
    for x in args:
        result = _checked("*", result * _number("*", x))
    return result

def div(table: SymbolTable, args: list[LispValue]) -> int:
    if not args:
        raise RispEmptyCallError("Called div on an empty list")
    result = _number("/", args[0])
    for x in args[1:]:
        if _number("/", x) == 0:
            raise RispZeroDivisionError("Divide by zero!")
        result = _checked("/", trunc_div(result, x))
    return result


OperatorFn = Callable[[SymbolTable, list], LispValue]

OPERATORS: dict[str, OperatorFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}
