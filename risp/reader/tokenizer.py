from __future__ import annotations

from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable


def tokenize(line: str, table: SymbolTable) -> list[Symbol]:
    """Split `line` into interned tokens.

    Parentheses are self-delimiting; every other run of non-whitespace
    characters is a single token. Never fails.
    """
    padded = line.replace("(", " ( ").replace(")", " ) ")
    return [table.intern(fragment) for fragment in padded.split()]
