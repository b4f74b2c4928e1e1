# -*- coding: utf-8 -*-

import logging
import time
from typing import Callable, List, Optional

import config
from domain.models import ClockSnapshot
from ui.terminal import AnsiTerminal, TerminalPort

log = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND

PANEL_INNER_WIDTH = 39
PANEL_TOP_MARGIN = 2


class ClockUnderflowError(ValueError):
    pass


def panel_lines(label: str, time_text: str) -> List[str]:
    blank = " " * PANEL_INNER_WIDTH
    return [
        "╭" + "─" * PANEL_INNER_WIDTH + "╮",
        "│" + blank + "│",
        "│" + label.center(PANEL_INNER_WIDTH) + "│",
        "│" + time_text.center(PANEL_INNER_WIDTH) + "│",
        "│" + blank + "│",
        "╰" + "─" * PANEL_INNER_WIDTH + "╯",
    ]


class Clock:
    """
    Countdown held as whole minutes and seconds.

    Minutes are derived modulo 60, so a duration of an hour or more loses its
    hour part. Every interval of the cycle is shorter than that.
    """

    def __init__(
        self,
        terminal: Optional[TerminalPort] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.minutes = 0
        self.seconds = 0

        self.terminal = terminal if terminal is not None else AnsiTerminal()
        self.sleep = sleep

        self._on_tick: Optional[Callable[[ClockSnapshot], None]] = None

    def set_on_tick(self, fn: Callable[[ClockSnapshot], None]) -> None:
        self._on_tick = fn

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(minutes=self.minutes, seconds=self.seconds)

    # ----- Arithmetic -----
    def set_duration_milliseconds(self, ms: int) -> None:
        if ms < 0:
            raise ValueError(f"duration must be non-negative, got {ms} ms")
        self.minutes = (ms // MS_PER_MINUTE) % 60
        self.seconds = (ms // MS_PER_SECOND) % 60

    def set_duration_minutes(self, minutes: int) -> None:
        self.set_duration_milliseconds(minutes * MS_PER_MINUTE)

    def milliseconds_remaining(self) -> int:
        return self.minutes * MS_PER_MINUTE + self.seconds * MS_PER_SECOND

    def decrement_one_second(self) -> None:
        remaining = self.milliseconds_remaining()
        if remaining == 0:
            raise ClockUnderflowError("cannot decrement a clock that reached 00:00")
        self.set_duration_milliseconds(remaining - MS_PER_SECOND)

    def formatted(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"

    # ----- Rendering -----
    def render_panel(self) -> None:
        """
        Rows start at the vertical centre; the first PANEL_TOP_MARGIN rows are
        cleared and left blank, so the box itself sits two rows lower.
        Terminals narrower than the box get a column of zero or less.
        """
        width, height = self.terminal.size()
        x = width // 2 - config.PANEL_X_OFFSET
        lines = [""] * PANEL_TOP_MARGIN + panel_lines(config.PANEL_LABEL, self.formatted())
        self.terminal.clear()
        for i, line in enumerate(lines):
            self.terminal.clear_line()
            self.terminal.move_cursor(x, height // 2 + i)
            self.terminal.write_line(line)

    def run_countdown(self) -> None:
        """
        Blocks until the clock reaches 00:00, one real second per tick.
        The zero check follows the decrement, so a clock started at N seconds
        ticks exactly N times.
        """
        while True:
            self.sleep(config.TICK_SECONDS)
            self.decrement_one_second()
            self.render_panel()
            self.terminal.flush()
            log.debug("tick %s", self.formatted())

            if self._on_tick:
                self._on_tick(self.snapshot())

            if self.milliseconds_remaining() == 0:
                break
