"""Console output with optional colouring of the text."""

from __future__ import annotations

import abc
import sys
from enum import IntEnum
from typing import TextIO


class ConsoleColor(IntEnum):
    """Colours available for console text."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    DARK_WHITE = 7
    LIGHT_BLACK = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_YELLOW = 14
    WHITE = 15
    DEFAULT = 16


_ANSI_FOREGROUND = {
    ConsoleColor.BLACK: "\033[30m",
    ConsoleColor.DARK_BLUE: "\033[34m",
    ConsoleColor.DARK_GREEN: "\033[32m",
    ConsoleColor.DARK_CYAN: "\033[36m",
    ConsoleColor.DARK_RED: "\033[31m",
    ConsoleColor.DARK_MAGENTA: "\033[35m",
    ConsoleColor.DARK_YELLOW: "\033[33m",
    ConsoleColor.DARK_WHITE: "\033[37m",
    ConsoleColor.LIGHT_BLACK: "\033[90m",
    ConsoleColor.LIGHT_BLUE: "\033[94m",
    ConsoleColor.LIGHT_GREEN: "\033[92m",
    ConsoleColor.LIGHT_CYAN: "\033[96m",
    ConsoleColor.LIGHT_RED: "\033[91m",
    ConsoleColor.LIGHT_MAGENTA: "\033[95m",
    ConsoleColor.LIGHT_YELLOW: "\033[93m",
    ConsoleColor.WHITE: "\033[97m",
    ConsoleColor.DEFAULT: "\033[39m",
}

_ANSI_BACKGROUND = {
    ConsoleColor.BLACK: "\033[40m",
    ConsoleColor.DARK_BLUE: "\033[44m",
    ConsoleColor.DARK_GREEN: "\033[42m",
    ConsoleColor.DARK_CYAN: "\033[46m",
    ConsoleColor.DARK_RED: "\033[41m",
    ConsoleColor.DARK_MAGENTA: "\033[45m",
    ConsoleColor.DARK_YELLOW: "\033[43m",
    ConsoleColor.DARK_WHITE: "\033[47m",
    ConsoleColor.LIGHT_BLACK: "\033[100m",
    ConsoleColor.LIGHT_BLUE: "\033[104m",
    ConsoleColor.LIGHT_GREEN: "\033[102m",
    ConsoleColor.LIGHT_CYAN: "\033[106m",
    ConsoleColor.LIGHT_RED: "\033[101m",
    ConsoleColor.LIGHT_MAGENTA: "\033[105m",
    ConsoleColor.LIGHT_YELLOW: "\033[103m",
    ConsoleColor.WHITE: "\033[107m",
    ConsoleColor.DEFAULT: "\033[49m",
}


def ansi_sequence(foreground: ConsoleColor, background: ConsoleColor) -> str:
    """Return the ANSI escape sequence selecting the given colours.

    A colour without a known sequence contributes nothing.
    """
    return _ANSI_FOREGROUND.get(foreground, "") + _ANSI_BACKGROUND.get(background, "")


class Log(abc.ABC):
    """Destination for console output that may colour its text."""

    @abc.abstractmethod
    def set_color(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        """Select the colours for text written from now on."""

    @abc.abstractmethod
    def write_line_stdout(self, text: str) -> None:
        """Write the text and a line break to standard output."""

    @abc.abstractmethod
    def write_line_stderr(self, text: str) -> None:
        """Write the text and a line break to the error output."""

    @abc.abstractmethod
    def write_stdout(self, text: str) -> None:
        """Write the text to standard output."""

    @abc.abstractmethod
    def write_stderr(self, text: str) -> None:
        """Write the text to the error output."""


class ConsoleLog(Log):
    """Writes to the console, colouring text only when the output is a terminal.

    Error output goes to the same stream as standard output unless another
    stream is given.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        use_color: bool | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._error_stream = error_stream if error_stream is not None else self._stream
        if use_color is None:
            isatty = getattr(self._stream, "isatty", None)
            try:
                use_color = bool(isatty()) if isatty is not None else False
            except (ValueError, OSError):
                use_color = False
        self.use_color = use_color

    def set_color(self, foreground: ConsoleColor, background: ConsoleColor) -> None:
        if self.use_color:
            self._stream.write(ansi_sequence(foreground, background))
            self._stream.flush()

    def write_line_stdout(self, text: str) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()

    def write_line_stderr(self, text: str) -> None:
        self._error_stream.write(f"{text}\n")
        self._error_stream.flush()

    def write_stdout(self, text: str) -> None:
        self._stream.write(text)

    def write_stderr(self, text: str) -> None:
        self._error_stream.write(text)