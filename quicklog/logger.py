from __future__ import annotations
from typing import Any, Optional

from quicklog.config import LoggerConfig
from quicklog.core.types import Color, add_color_to_text
from quicklog.environment import BuildMode, Environment, current_environment
from quicklog.levels import LevelMask, Severity, bucket_for
from quicklog.sinks import ConsoleSink, Sink


class QuickLog:
    """Severity-gated front end for the engine console.

    The active level mask is picked per call from the build mode of the
    injected Environment. Colour markup is only added in the editor.
    """

    add_color_to_text = staticmethod(add_color_to_text)

    def __init__(self, config: Optional[LoggerConfig] = None,
                 sink: Optional[Sink] = None,
                 environment: Optional[Environment] = None):
        self.config = config if config is not None else LoggerConfig()
        self.sink: Sink = sink if sink is not None else ConsoleSink()
        self.environment = environment if environment is not None else current_environment()

    @property
    def build_mode(self) -> BuildMode:
        return self.environment.build_mode

    @property
    def active_levels(self) -> LevelMask:
        return self.config.levels_for(self.build_mode)

    @property
    def use_debug_action(self) -> bool:
        return self.config.use_debug_action_for(self.build_mode)

    def is_enabled(self, level: Severity) -> bool:
        return level in self.active_levels

    def _context(self, context: Any) -> Any:
        return context if context is not None else self.config.cached_context

    def _decorate(self, msg: str, color: Optional[Color]) -> str:
        if not self.environment.is_editor:
            return msg
        if color is not None:
            return add_color_to_text(msg, color)
        if self.config.use_color:
            return add_color_to_text(msg, self.config.default_color)
        return msg

    def log(self, message: Any, level: Severity = Severity.DEBUG,
            context: Any = None, color: Optional[Color] = None) -> None:
        if not self.is_enabled(level):
            return
        bucket = bucket_for(level)
        if bucket is None:
            return
        msg = message if isinstance(message, str) else str(message)
        msg = self._decorate(msg, color)
        getattr(self.sink, bucket)(msg, self._context(context))

    def log_info(self, message: Any, context: Any = None, color: Optional[Color] = None) -> None:
        self.log(message, Severity.INFO, context, color)

    def log_debug(self, message: Any, context: Any = None, color: Optional[Color] = None) -> None:
        self.log(message, Severity.DEBUG, context, color)

    def log_warning(self, message: Any, context: Any = None, color: Optional[Color] = None) -> None:
        self.log(message, Severity.WARNING, context, color)

    def log_error(self, message: Any, context: Any = None, color: Optional[Color] = None) -> None:
        self.log(message, Severity.ERROR, context, color)

    def log_exception(self, error: BaseException, context: Any = None) -> None:
        # error objects keep their traceback, so they bypass the message path
        if not self.is_enabled(Severity.EXCEPTION):
            return
        self.sink.exception(error, self._context(context))
