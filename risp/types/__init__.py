from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable, WELL_KNOWN

__all__ = ["Symbol", "SymbolTable", "WELL_KNOWN"]
