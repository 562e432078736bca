import pytest
from quicklog.config import LoggerConfig
from quicklog.core.errors import ConfigError
from quicklog.core.types import Color, to_hex
from quicklog.environment import BuildMode
from quicklog.levels import ALL_LEVELS, NO_LEVELS, Severity


def test_defaults_per_build_mode():
    cfg = LoggerConfig()
    assert cfg.levels_for(BuildMode.RELEASE_BUILD) == {Severity.EXCEPTION, Severity.ERROR}
    assert cfg.levels_for(BuildMode.DEBUG_BUILD) == {Severity.WARNING, Severity.EXCEPTION, Severity.ERROR}
    assert cfg.levels_for(BuildMode.EDITOR) == ALL_LEVELS
    assert cfg.use_debug_action_for(BuildMode.EDITOR) is True
    assert cfg.use_debug_action_for(BuildMode.DEBUG_BUILD) is False
    assert cfg.use_debug_action_for(BuildMode.RELEASE_BUILD) is False
    assert cfg.use_color is False and cfg.default_color == Color.WHITE
    assert cfg.cached_context is None


def test_from_thresholds():
    cfg = LoggerConfig.from_thresholds(build=Severity.NONE, debug=Severity.EXCEPTION, editor=Severity.INFO)
    assert cfg.levels_in_build == NO_LEVELS
    assert cfg.levels_in_debug == {Severity.EXCEPTION, Severity.ERROR}
    assert cfg.levels_in_editor == ALL_LEVELS


def test_normalize_coerces_names():
    cfg = LoggerConfig(levels_in_debug="WARNING|ERROR", default_color="#00FF00")
    assert cfg.levels_in_debug == frozenset({Severity.WARNING, Severity.ERROR})
    assert cfg.default_color == Color.GREEN


def test_invalid_values_raise():
    with pytest.raises(ConfigError):
        LoggerConfig(levels_in_build="LOUD")
    with pytest.raises(ConfigError) as exc:
        LoggerConfig(default_color="red-ish")
    assert exc.value.field == "default_color"
    with pytest.raises(ConfigError):
        LoggerConfig(use_color="yes")


def test_dict_round_trip_keeps_context_out():
    ctx = object()
    cfg = LoggerConfig(levels_in_editor="INFO|ERROR", use_color=True,
                       default_color=Color.RED, cached_context=ctx)
    raw = cfg.to_dict()
    assert raw["levels_in_editor"] == "INFO|ERROR"
    assert raw["default_color"] == "#FF0000"
    assert "cached_context" not in raw
    again = LoggerConfig.from_dict(raw)
    assert again == cfg
    assert again.cached_context is None


def test_from_dict_ignores_unknown_keys():
    cfg = LoggerConfig.from_dict({"levels_in_build": ["ERROR"], "volume": 11}, cached_context="scene")
    assert cfg.levels_in_build == {Severity.ERROR}
    assert cfg.cached_context == "scene"


def test_mask_assignment_is_normalized():
    cfg = LoggerConfig()
    cfg.levels_in_editor = "WARNING|ERROR"
    assert cfg.levels_in_editor == frozenset({Severity.WARNING, Severity.ERROR})
    cfg.levels_in_debug = Severity.ERROR
    assert cfg.levels_in_debug == frozenset({Severity.ERROR})
    cfg.levels_in_build = ["LogException", Severity.NONE]
    assert cfg.levels_in_build == frozenset({Severity.EXCEPTION})
    cfg.levels_in_build = None
    assert cfg.levels_for(BuildMode.RELEASE_BUILD) == NO_LEVELS
    with pytest.raises(ConfigError):
        cfg.levels_in_editor = "LOUD"


def test_dict_round_trip_rounds_colour_to_hex():
    cfg = LoggerConfig(default_color=Color.GRAY)
    again = LoggerConfig.from_dict(cfg.to_dict())
    assert again.to_dict() == cfg.to_dict()
    assert to_hex(again.default_color) == to_hex(cfg.default_color) == "808080"
    assert again.default_color.r == 128 / 255
