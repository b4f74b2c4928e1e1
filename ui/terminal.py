# -*- coding: utf-8 -*-

import os
import sys
from typing import Optional, Protocol, TextIO, Tuple

CLEAR_ALL = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"


class TerminalUnavailableError(RuntimeError):
    pass


class TerminalPort(Protocol):
    """Everything the clock needs from a terminal to draw its panel."""

    def size(self) -> Tuple[int, int]: ...

    def clear(self) -> None: ...

    def clear_line(self) -> None: ...

    def move_cursor(self, x: int, y: int) -> None: ...

    def write_line(self, text: str) -> None: ...

    def flush(self) -> None: ...


def goto(x: int, y: int) -> str:
    # 1-based column/row, same convention as the cursor position report
    return f"\x1b[{y};{x}H"


class AnsiTerminal:
    """
    TerminalPort backed by a text stream (stdout by default) and ANSI escapes.
    Size is queried on every call so a resized terminal re-centres the panel.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def size(self) -> Tuple[int, int]:
        try:
            cols, rows = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError, AttributeError) as exc:
            raise TerminalUnavailableError(
                "cannot determine terminal size; is stdout a terminal?"
            ) from exc
        return cols, rows

    def clear(self) -> None:
        self.stream.write(CLEAR_ALL)

    def clear_line(self) -> None:
        self.stream.write(CLEAR_LINE)

    def move_cursor(self, x: int, y: int) -> None:
        self.stream.write(goto(x, y))

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as exc:
            raise TerminalUnavailableError("failed to flush terminal output") from exc
