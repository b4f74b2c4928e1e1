# -*- coding: utf-8 -*-

import logging
from datetime import datetime
from typing import Callable, Optional

import config
from core.clock import Clock
from domain.models import Phase, TrackerSnapshot

log = logging.getLogger(__name__)


class CycleTracker:
    """
    Position in the four-step work cycle, and the intervals that follow from it.

    The phase is never stored: it is WORKING while a work countdown runs and
    otherwise follows from the position (see determine_next_phase).
    """

    def __init__(self, clock_factory: Callable[[], Clock] = Clock):
        self.clock_factory = clock_factory

        self._position: Optional[int] = None
        self._working = False
        self.started_at: Optional[datetime] = None

        self._on_phase_start: Optional[Callable[[Phase, int], None]] = None

    # ----- Callbacks -----
    def set_on_phase_start(self, fn: Callable[[Phase, int], None]) -> None:
        self._on_phase_start = fn

    def _emit_phase_start(self, phase: Phase, minutes: int) -> None:
        if self._on_phase_start:
            self._on_phase_start(phase, minutes)

    # ----- State -----
    @property
    def position(self) -> Optional[int]:
        return self._position

    @property
    def phase(self) -> Phase:
        if self._working:
            return Phase.WORKING
        return self.determine_next_phase()

    def snapshot(self) -> TrackerSnapshot:
        return TrackerSnapshot(
            position=self._position,
            phase=self.phase,
            started_at=self.started_at,
        )

    def increment_position(self) -> None:
        if self._position is None:
            self._position = 1
        elif 1 <= self._position < config.CYCLE_LENGTH:
            self._position += 1
        else:
            # past the long break: the cycle starts over
            self._position = None

    def reset_cycle(self) -> None:
        self._position = None

    def determine_next_phase(self) -> Phase:
        if self._position is None:
            return Phase.IDLE
        if 1 <= self._position < config.CYCLE_LENGTH:
            return Phase.SHORT_BREAK
        if self._position == config.CYCLE_LENGTH:
            return Phase.LONG_BREAK
        return Phase.IDLE

    # ----- Intervals -----
    def run_work_interval(self) -> Phase:
        """
        Runs one 25 minute work countdown followed by the break it earns.
        Returns the break phase that ran (IDLE when none did).
        """
        self.started_at = datetime.now()
        self._working = True
        self.increment_position()
        log.info("work interval %s started", self._position)
        try:
            self._countdown(Phase.WORKING, config.WORK_MINUTES)
        finally:
            self._working = False

        next_phase = self.phase
        log.info("work interval %s finished, next: %s", self._position, next_phase.value)
        self.run_break_phase()
        return next_phase

    def run_break_phase(self) -> None:
        phase = self.phase
        if phase == Phase.SHORT_BREAK:
            self.run_short_break()
        elif phase == Phase.LONG_BREAK:
            self.run_long_break()

    def run_short_break(self) -> None:
        self._countdown(Phase.SHORT_BREAK, config.SHORT_BREAK_MINUTES)

    def run_long_break(self) -> None:
        self._countdown(Phase.LONG_BREAK, config.LONG_BREAK_MINUTES)

    def _countdown(self, phase: Phase, minutes: int) -> None:
        clock = self.clock_factory()
        clock.set_duration_minutes(minutes)
        self._emit_phase_start(phase, minutes)
        clock.run_countdown()
        log.info("%s finished", phase.value)
