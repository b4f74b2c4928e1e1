#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import sys
from typing import List, Optional

import config
from services.pomodoro_service import PomodoroService
from ui.terminal import TerminalUnavailableError

log = logging.getLogger(__name__)


def log_level(name: str) -> int:
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def setup_logging() -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE, encoding="utf-8"))
    logging.basicConfig(
        level=log_level(config.LOG_LEVEL),
        format=config.LOG_FORMAT,
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pomodoro",
        description="a terminal based pomodoro timer",
    )
    sub = p.add_subparsers(dest="command", metavar="command")
    sub.required = True
    sub.add_parser("start", help="starts your pomodoro timer")
    return p


def start_pomodoro() -> int:
    service = PomodoroService()
    try:
        service.start()
    except TerminalUnavailableError as exc:
        log.error("terminal unavailable: %s", exc)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        if args.command == "start":
            return start_pomodoro()
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130
    return 2


if __name__ == "__main__":
    sys.exit(main())
