from __future__ import annotations

import sys
from typing import Optional, TextIO


class Console:
    """Line-oriented wrapper over stdin/stdout.

    Note: Wrapped so tests can drive the menu with in-memory streams.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self, prompt: str = "") -> str:
        """Write the prompt and return one line without its line break.

        Raises EOFError when the input stream is exhausted.
        """
        if prompt:
            self.write(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")
