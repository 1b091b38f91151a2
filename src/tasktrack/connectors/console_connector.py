# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.errors import TaskError

logger = logging.getLogger(__name__)


class StdConsole:
    """
    Console port backed by stdin/stdout.

    EOF and Ctrl+C while waiting for input both surface as TaskError(IO);
    the session decides whether that is fatal.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str = "") -> str:
        out = self._stdout or sys.stdout
        if prompt:
            out.write(prompt)
            out.flush()
        try:
            line = (self._stdin or sys.stdin).readline()
        except KeyboardInterrupt as e:
            logger.info("Console KeyboardInterrupt while reading input.")
            out.write("\n")
            raise TaskError.io("input interrupted") from e
        except OSError as e:
            raise TaskError.io(f"cannot read input: {e}") from e

        # readline() returns "" only at EOF; a blank line is "\n".
        if line == "":
            logger.info("Console EOF received.")
            raise TaskError.io("end of input")
        return line.strip()

    def write_line(self, text: str = "") -> None:
        out = self._stdout or sys.stdout
        out.write(text + "\n")
        out.flush()
