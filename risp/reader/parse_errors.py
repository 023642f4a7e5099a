"""Structural errors collected by the parser.

These are values, not exceptions: the parser gathers all of them for a line
and hands the list over inside a single RispSyntaxError.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnmatchedCloser:
    """A ')' with no open list to close."""

    @property
    def message(self) -> str:
        return "Unmatched closing delimiter"


@dataclass(frozen=True)
class UnmatchedOpeners:
    """Lists still open at end of input; `depth` counts them."""
    depth: int

    @property
    def message(self) -> str:
        return f"{self.depth} unmatched opening delimiter"


@dataclass(frozen=True)
class TooDeep:
    """Nesting exceeded the configured limit."""
    limit: int

    @property
    def message(self) -> str:
        return f"Expression nested deeper than {self.limit} levels"


ParseError = UnmatchedCloser | UnmatchedOpeners | TooDeep
