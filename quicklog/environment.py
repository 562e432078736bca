"""
Build mode resolution.

The host is queried once (editor/tooling? debug-instrumented?) and the
answer is kept in an immutable Environment that loggers receive explicitly.
``current_environment`` caches the detected value for the process.
"""
from __future__ import annotations
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quicklog.core.errors import ConfigError
from quicklog.core.logging import logger


class BuildMode(Enum):
    EDITOR = "editor"
    DEBUG_BUILD = "debug"
    RELEASE_BUILD = "release"


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ConfigError(name, f"expected 0/1, got {raw!r}")


def _interactive() -> bool:
    return hasattr(sys, "ps1") or bool(sys.flags.interactive)


@dataclass(frozen=True)
class Environment:
    is_editor: bool = False
    is_debug_build: bool = False

    @property
    def build_mode(self) -> BuildMode:
        if self.is_editor:
            return BuildMode.EDITOR
        if self.is_debug_build:
            return BuildMode.DEBUG_BUILD
        return BuildMode.RELEASE_BUILD

    @classmethod
    def for_mode(cls, mode: BuildMode) -> "Environment":
        if mode is BuildMode.EDITOR:
            return cls(is_editor=True, is_debug_build=True)
        if mode is BuildMode.DEBUG_BUILD:
            return cls(is_editor=False, is_debug_build=True)
        return cls(is_editor=False, is_debug_build=False)

    @classmethod
    def detect(cls) -> "Environment":
        """Query the host.

        QUICKLOG_BUILD=editor|debug|release forces a mode. Otherwise the
        editor flag comes from QUICKLOG_EDITOR or an interactive interpreter,
        and the debug flag from QUICKLOG_DEBUG or a non-optimised interpreter.
        """
        forced = os.environ.get("QUICKLOG_BUILD", "").strip().lower()
        if forced:
            overridden = [n for n in ("QUICKLOG_EDITOR", "QUICKLOG_DEBUG") if os.environ.get(n)]
            if overridden:
                logger.warn("BuildFlagsIgnored", build=forced, ignored=",".join(overridden))
            try:
                env = cls.for_mode(BuildMode(forced))
            except ValueError:
                raise ConfigError("QUICKLOG_BUILD", f"unknown build {forced!r}") from None
        else:
            editor = _env_flag("QUICKLOG_EDITOR")
            debug = _env_flag("QUICKLOG_DEBUG")
            env = cls(
                is_editor=_interactive() if editor is None else editor,
                is_debug_build=(sys.flags.optimize == 0) if debug is None else debug,
            )
        logger.debug("BuildModeResolved", mode=env.build_mode.value,
                     editor=env.is_editor, debug=env.is_debug_build)
        return env


_current: Optional[Environment] = None


def current_environment() -> Environment:
    """Process-wide environment, detected on first use."""
    global _current
    if _current is None:
        _current = Environment.detect()
    return _current


def reset_environment() -> None:
    global _current
    _current = None


__all__ = ["BuildMode", "Environment", "current_environment", "reset_environment"]
