"""Line-oriented console front end for Clojette.

Reads one line at a time, evaluates it against a single long-lived
Interpreter and prints the result or the error message, until end of input.
"""

from __future__ import annotations
import logging
import sys
from contextlib import redirect_stdout
from typing import Optional, TextIO

from clojette import config
from clojette.errors import ClojetteError
from clojette.interpreter import Interpreter
from clojette.printer import to_string

logger = logging.getLogger(__name__)

BANNER = "Clojure interpreter written in Python"
CLOSING = "REPL closing."


class Repl:
    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.interp = interp or Interpreter()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.prompt = config.get_prompt()
        self.output_prompt = config.get_output_prompt()

    def _print(self, *parts: str) -> None:
        print(*parts, file=self.stdout, flush=True)

    def handle_line(self, line: str) -> None:
        """Evaluate a single line and report its value or error."""
        try:
            # println writes to sys.stdout; keep it on this REPL's stream
            with redirect_stdout(self.stdout):
                result = self.interp.eval_line(line)
            text = to_string(result)
        except ClojetteError as ex:
            logger.debug("evaluation failed", exc_info=True)
            self._print(f"{type(ex).__name__}: {ex}")
        except RecursionError:
            logger.debug("evaluation exhausted the stack", exc_info=True)
            self._print("RecursionError: maximum recursion depth exceeded")
        else:
            self._print(self.output_prompt, text)

    def run(self) -> int:
        self._print(BANNER)
        self._print(self.prompt)
        for line in self.stdin:
            if not line.strip():
                continue
            self.handle_line(line)
            self._print(self.prompt)
        self._print(CLOSING)
        return 0


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
        logger.info("recursion limit set to %d", limit)
    return Repl().run()


if __name__ == "__main__":
    sys.exit(main())
