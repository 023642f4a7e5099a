# Core type aliases for risp's data model.
# Expressions are plain Python values:
#   - Symbol handle  -> risp.types.symbol.Symbol
#   - Number         -> int (always within the signed 64-bit range)
#   - Bool           -> bool
#   - List           -> list of expressions
# n.b. bool is a subclass of int, so Number checks must exclude bool.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote parsed forms.
# - LispValue:  Use in evaluator code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed forms and values share one representation
SExpression = LispValue

# Evaluator function type, handed to special forms
EvaluatorFn = Callable[..., LispValue]

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
