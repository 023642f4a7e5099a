from timeit import timeit

from risp.interpreter import Interpreter
from risp.reader.parser import parse
from risp.reader.tokenizer import tokenize
from risp.evaluation.evaluator import evaluate


def _nested_sum(depth: int) -> str:
    code = "1"
    for i in range(depth):
        code = f"(+ {code} (* {i} 2) (- {i}))"
    return code


def time_tokenize(code: str, rounds: int) -> float:
    itp = Interpreter()
    # Warmup so every token is already interned
    tokenize(code, itp.table)
    return timeit(lambda: tokenize(code, itp.table), number=rounds)


def time_parse(code: str, rounds: int) -> float:
    """Time the parser only: tokens are produced once up front."""
    itp = Interpreter()
    tokens = tokenize(code, itp.table)
    return timeit(lambda: parse(tokens, itp.table, itp.max_depth), number=rounds)


def time_evaluate(code: str, rounds: int) -> float:
    """Time the evaluator only on an already parsed tree."""
    itp = Interpreter()
    (expr,) = itp.read(code)
    return timeit(lambda: evaluate(expr, itp.table, 0, itp.max_depth), number=rounds)


def time_run_line(code: str, rounds: int) -> float:
    itp = Interpreter()
    return timeit(lambda: itp.run_line(code), number=rounds)


if __name__ == "__main__":
    cases = {
        "flat": "(+ 1 2 3 4 5 6 7 8 9 10)",
        "if": "(if #t (* 6 7) (/ 1 0))",
        "nested-50": _nested_sum(50),
    }
    rounds = 10_000
    for name, code in cases.items():
        print(f"{name}:")
        print(f"  tokenize  {time_tokenize(code, rounds):.4f}s")
        print(f"  parse     {time_parse(code, rounds):.4f}s")
        print(f"  evaluate  {time_evaluate(code, rounds):.4f}s")
        print(f"  run_line  {time_run_line(code, rounds):.4f}s")
