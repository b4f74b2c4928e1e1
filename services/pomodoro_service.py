# -*- coding: utf-8 -*-

import logging
import time
from typing import Callable, Optional

from core.clock import Clock
from core.cycle_tracker import CycleTracker
from domain.models import ClockSnapshot, Phase, TrackerSnapshot
from ui.terminal import AnsiTerminal, TerminalPort

log = logging.getLogger(__name__)


class PomodoroService:
    """
    Orchestrates:
    - CycleTracker state
    - one Clock per interval, all drawing on the same terminal
    - Callbacks for callers that want to observe ticks and phase starts
    """

    def __init__(
        self,
        terminal: Optional[TerminalPort] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.terminal = terminal if terminal is not None else AnsiTerminal()
        self.sleep = sleep

        self.tracker = CycleTracker(clock_factory=self._new_clock)
        self.tracker.set_on_phase_start(self._emit_phase_start)

        self._on_tick: Optional[Callable[[ClockSnapshot], None]] = None
        self._on_phase_start: Optional[Callable[[Phase, int], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[ClockSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_start(self, fn: Callable[[Phase, int], None]) -> None:
        self._on_phase_start = fn

    def _emit_tick(self, snap: ClockSnapshot) -> None:
        if self._on_tick:
            self._on_tick(snap)

    def _emit_phase_start(self, phase: Phase, minutes: int) -> None:
        log.info("starting %s (%d min)", phase.value, minutes)
        if self._on_phase_start:
            self._on_phase_start(phase, minutes)

    # ----- Public API -----
    def get_snapshot(self) -> TrackerSnapshot:
        return self.tracker.snapshot()

    def start(self) -> Phase:
        """
        One work interval and the break that follows it, then return.
        Does not continue into the next work interval.
        """
        # fail before the first 25 minutes rather than on the first tick
        self.terminal.size()

        phase = self.tracker.run_work_interval()
        log.info("pomodoro finished after %s", phase.value)
        return phase

    # ----- Internals -----
    def _new_clock(self) -> Clock:
        clock = Clock(terminal=self.terminal, sleep=self.sleep)
        clock.set_on_tick(self._emit_tick)
        return clock
