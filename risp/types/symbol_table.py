"""Symbol table (interner) for risp.

The SymbolTable maps source text fragments to small integer handles and back.
It is append-only: a handle, once issued, resolves to the same text for the
lifetime of the table. The nine well-known tokens are interned eagerly so that
the tokenizer, parser and evaluator can compare against them by handle.
"""

from __future__ import annotations

import threading
from typing import Optional

from risp.errors import RispInvalidHandle
from risp.types.symbol import Symbol


# name -> attribute holding its handle on the table
WELL_KNOWN = {
    "(": "open_paren",
    ")": "close_paren",
    "+": "add_symbol",
    "-": "sub_symbol",
    "*": "mul_symbol",
    "/": "div_symbol",
    "#t": "true_symbol",
    "#f": "false_symbol",
    "if": "if_symbol",
}


class SymbolTable:
    """Bijective mapping between text and Symbol handles."""

    __slots__ = (
        "_ids",
        "_texts",
        "_lock",
        "_well_known",
        *WELL_KNOWN.values(),
    )

    def __init__(self):
        self._ids: dict[str, int] = {}
        self._texts: list[str] = []
        # intern/resolve may be called from several REPL server threads
        self._lock = threading.Lock()
        self._well_known: dict[Symbol, str] = {}
        for text, attr in WELL_KNOWN.items():
            sym = self.intern(text)
            setattr(self, attr, sym)
            self._well_known[sym] = text

    def intern(self, text: str) -> Symbol:
        """Return the handle for `text`, allocating one on first sight."""
        with self._lock:
            idx = self._ids.get(text)
            if idx is None:
                idx = len(self._texts)
                self._texts.append(text)
                self._ids[text] = idx
            return Symbol(idx)

    def resolve(self, symbol: Symbol) -> str:
        """Return the text behind `symbol`.

        Raises RispInvalidHandle if `symbol` is not a handle this table issued.
        """
        if not isinstance(symbol, Symbol):
            raise RispInvalidHandle(f"Cannot resolve {symbol!r}: not a symbol")
        with self._lock:
            if not 0 <= symbol.id < len(self._texts):
                raise RispInvalidHandle(f"Cannot resolve {symbol!r}: unknown handle")
            return self._texts[symbol.id]

    def well_known_name(self, symbol: Symbol) -> Optional[str]:
        """Text of `symbol` if it is one of the well-known tokens, else None."""
        return self._well_known.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, Symbol) and 0 <= symbol.id < len(self._texts)

    def __len__(self) -> int:
        return len(self._texts)

    def __repr__(self):
        return f"SymbolTable({len(self)} symbols)"
