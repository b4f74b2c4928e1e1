# -*- coding: utf-8 -*-

import os

# Interval lengths are fixed by design of the cycle.
WORK_MINUTES = 25
SHORT_BREAK_MINUTES = 5
LONG_BREAK_MINUTES = 30
CYCLE_LENGTH = 4

TICK_SECONDS = 1

# Panel layout
PANEL_LABEL = "Time to Work!"
PANEL_X_OFFSET = 20

# Logging (read by the CLI only)
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_LEVEL = os.environ.get("POMODORO_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("POMODORO_LOG_FILE") or None
