"""
Internal diagnostics for quicklog itself.
Messages go to stdout in colour; the engine console sink is never involved.
"""
from __future__ import annotations
import os
import sys
from datetime import datetime, timezone
from typing import Literal, Any

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

Level = Literal["DEBUG","INFO","WARN","ERROR"]

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}
RESET = Style.RESET_ALL

class Logger:
    _order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
    def __init__(self, level: Level = "WARN"):
        self.threshold = self._order[level]

    def enabled(self, lvl: Level) -> bool:
        return self._order[lvl] >= self.threshold

    def _emit(self, lvl: Level, msg: str, **extra: Any):
        if not self.enabled(lvl):
            return
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extras = ""
        if extra:
            kv = " ".join(f"{k}={v}" for k,v in extra.items())
            extras = " " + kv
        color = COLORS[lvl]
        sys.stdout.write(f"{color}{ts} [quicklog:{lvl}] {msg}{extras}{RESET}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)

def _initial_level() -> Level:
    lvl = os.environ.get("QUICKLOG_DIAG_LEVEL", "WARN").strip().upper()
    if lvl not in Logger._order:
        return "WARN"
    return lvl  # type: ignore[return-value]

logger = Logger(_initial_level())
