from __future__ import annotations

"""
Per-line analysis of risp documents for the language server.

Each line of a document is one input line of the shell, so every line is read
and evaluated on its own. Evaluation is pure and always terminates, which
makes it safe to run on every edit.

- Parse errors become Error diagnostics spanning the line.
- Evaluation errors become Warning diagnostics spanning the offending
  top-level expression's line.
- Successful values are kept so hover can show them.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from risp.errors import RispEvalError, RispSyntaxError
from risp.interpreter import Interpreter
from risp.printer import display, format_eval_error

SOURCE = "risp-ls"


@dataclass
class LineResult:
    line: int
    outputs: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class DocumentAnalysis:
    lines: Dict[int, LineResult] = field(default_factory=dict)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [d for res in self.lines.values() for d in res.diagnostics]

    def hover_text(self, line: int) -> Optional[str]:
        res = self.lines.get(line)
        if res is None or not res.outputs:
            return None
        return "\n".join(res.outputs)


def _line_range(line: int, text: str) -> Range:
    return Range(start=Position(line=line, character=0), end=Position(line=line, character=len(text)))


def analyze_line(interp: Interpreter, line_no: int, text: str) -> LineResult:
    res = LineResult(line=line_no)
    rng = _line_range(line_no, text)
    try:
        exprs = interp.read(text)
    except RispSyntaxError as err:
        for e in err.errors:
            res.diagnostics.append(
                Diagnostic(range=rng, message=e.message, severity=DiagnosticSeverity.Error, source=SOURCE)
            )
        return res

    for expr in exprs:
        try:
            value = interp.evaluate(expr)
        except RispEvalError as err:
            res.outputs.append(format_eval_error(err))
            res.diagnostics.append(
                Diagnostic(range=rng, message=str(err), severity=DiagnosticSeverity.Warning, source=SOURCE)
            )
        else:
            res.outputs.append(display(value, interp.table))
    return res


def analyze(text: str, interp: Interpreter | None = None) -> DocumentAnalysis:
    interp = interp if interp is not None else Interpreter()
    analysis = DocumentAnalysis()
    for line_no, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        analysis.lines[line_no] = analyze_line(interp, line_no, line)
    return analysis
