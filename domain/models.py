# -*- coding: utf-8 -*-

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Phase(str, Enum):
    WORKING = "working"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"
    IDLE = "idle"


@dataclass(frozen=True)
class ClockSnapshot:
    minutes: int
    seconds: int

    @property
    def formatted(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class TrackerSnapshot:
    position: Optional[int]  # 1..4, None = cycle not started
    phase: Phase
    started_at: Optional[datetime]
