"""risp Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for risp.
- Per-line document analysis (diagnostics and hover values).
- A simple TCP REPL server to evaluate code via the existing Interpreter.
"""

__all__ = [
    "server",
    "diagnostics",
    "repl_server",
]
