from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from quicklog.core.errors import ColorFormatError, ConfigError
from quicklog.core.logging import logger
from quicklog.core.types import Color, to_hex
from quicklog.environment import BuildMode
from quicklog.levels import (
    ALL_LEVELS, LevelMask, Severity, at_least, format_levels, parse_levels,
)

_LEVEL_FIELDS = ("levels_in_build", "levels_in_debug", "levels_in_editor")
_BOOL_FIELDS = (
    "use_debug_action_in_build", "use_debug_action_in_debug",
    "use_debug_action_in_editor", "use_color",
)

@dataclass
class LoggerConfig:
    levels_in_build: LevelMask = frozenset({Severity.EXCEPTION, Severity.ERROR})
    levels_in_debug: LevelMask = frozenset({Severity.WARNING, Severity.EXCEPTION, Severity.ERROR})
    levels_in_editor: LevelMask = ALL_LEVELS
    use_debug_action_in_build: bool = False
    use_debug_action_in_debug: bool = False
    use_debug_action_in_editor: bool = True
    use_color: bool = False               # only applied when running in the editor
    default_color: Color = Color.WHITE
    cached_context: Any = field(default=None, compare=False)  # opaque, passed to the sink

    def __post_init__(self):
        self.normalize()

    def __setattr__(self, name: str, value: Any):
        # masks stay frozensets however the host assigns them
        if name in _LEVEL_FIELDS:
            value = parse_levels(value, field=name)
        super().__setattr__(name, value)

    @classmethod
    def from_thresholds(cls, build: Severity = Severity.EXCEPTION,
                        debug: Severity = Severity.WARNING,
                        editor: Severity = Severity.DEBUG, **kw) -> "LoggerConfig":
        """Ordinal form: each build logs every level >= its threshold (NONE = silent)."""
        return cls(levels_in_build=at_least(build),
                   levels_in_debug=at_least(debug),
                   levels_in_editor=at_least(editor), **kw)

    def normalize(self):
        for name in _BOOL_FIELDS:
            val = getattr(self, name)
            if not isinstance(val, bool):
                raise ConfigError(name, f"expected a boolean, got {val!r}")
        if not isinstance(self.default_color, Color):
            try:
                self.default_color = Color.from_hex(self.default_color)
            except ColorFormatError as e:
                raise ConfigError("default_color", str(e)) from e

    def levels_for(self, mode: BuildMode) -> LevelMask:
        if mode is BuildMode.EDITOR:
            return self.levels_in_editor
        if mode is BuildMode.DEBUG_BUILD:
            return self.levels_in_debug
        return self.levels_in_build

    def use_debug_action_for(self, mode: BuildMode) -> bool:
        if mode is BuildMode.EDITOR:
            return self.use_debug_action_in_editor
        if mode is BuildMode.DEBUG_BUILD:
            return self.use_debug_action_in_debug
        return self.use_debug_action_in_build

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], cached_context: Optional[Any] = None) -> "LoggerConfig":
        field_names = {f.name for f in fields(cls)} - {"cached_context"}
        kwargs = {}
        for key, val in raw.items():
            if key in field_names:
                kwargs[key] = val
            else:
                logger.debug("ConfigKeyIgnored", key=key)
        return cls(cached_context=cached_context, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Editable fields as plain values. Colours go through #RRGGBB, so channels
        that are not multiples of 1/255 come back rounded."""
        out: Dict[str, Any] = {name: format_levels(getattr(self, name)) for name in _LEVEL_FIELDS}
        for name in _BOOL_FIELDS:
            out[name] = getattr(self, name)
        out["default_color"] = "#" + to_hex(self.default_color)
        return out
