"""Line-reading shell around the risp Interpreter.

Prints the prompt on its own line, reads one line, prints one output line per
result or diagnostic, and repeats until end of input.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from risp.config import get_log_level, get_prompt
from risp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    interp: Interpreter | None = None,
    prompt: str | None = None,
) -> None:
    interp = interp if interp is not None else Interpreter()
    prompt = prompt if prompt is not None else get_prompt()

    while True:
        print(prompt, file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            logger.debug("end of input, leaving shell")
            break
        for out in interp.run_line(line):
            print(out, file=stdout)


def main() -> None:
    logging.basicConfig(level=get_log_level(), stream=sys.stderr)
    try:
        run_repl()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
