"""Line-oriented text input and output for the game."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Writes lines of text and reads lines typed by the player."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _input(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _output(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, *args: object) -> None:
        """Write the arguments, joined without separators, as one line."""
        self._output.write("".join(str(arg) for arg in args) + "\n")
        self._output.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and return the next input line without its line ending.

        Raises EOFError when the input is exhausted.
        """
        if prompt:
            self._output.write(prompt)
            self._output.flush()
        line = self._input.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")