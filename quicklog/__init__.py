"""
Severity-gated logging helper for game engine consoles.
Modules:
- levels.py (Severity, level masks, sink buckets)
- environment.py (BuildMode resolution)
- config.py (LoggerConfig per build mode)
- sinks.py (console collaborators)
- logger.py (QuickLog front end)
"""
from .core.types import Color, add_color_to_text, to_hex
from .environment import BuildMode, Environment, current_environment
from .levels import ALL_LEVELS, NO_LEVELS, Severity, at_least
from .config import LoggerConfig
from .sinks import ConsoleSink, RecordingSink, Sink
from .logger import QuickLog
__all__ = [
    "Color", "add_color_to_text", "to_hex",
    "BuildMode", "Environment", "current_environment",
    "ALL_LEVELS", "NO_LEVELS", "Severity", "at_least",
    "LoggerConfig", "ConsoleSink", "RecordingSink", "Sink", "QuickLog",
]
