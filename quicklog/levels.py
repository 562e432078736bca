"""Severity categories and level masks.

A mask is a frozenset of enabled Severity members. Ordinal thresholds
("everything from WARNING up") are converted to masks with ``at_least``.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, Optional, Union

from quicklog.core.errors import ConfigError


class Severity(IntEnum):
    INFO = 0
    DEBUG = 1
    WARNING = 2
    EXCEPTION = 3
    ERROR = 4
    NONE = 5    # never emitted; as a threshold it silences everything


LevelMask = FrozenSet[Severity]
LevelsLike = Union[Severity, str, Iterable[Union[Severity, str]], None]

ALL_LEVELS: LevelMask = frozenset(s for s in Severity if s is not Severity.NONE)
NO_LEVELS: LevelMask = frozenset()

_ALIASES: Dict[str, LevelMask] = {
    "ALL": ALL_LEVELS,
    "ALLLOG": ALL_LEVELS,
    "EVERYTHING": ALL_LEVELS,
    "NONE": NO_LEVELS,
    "": NO_LEVELS,
}

# Sink method per level; NONE has no bucket.
_BUCKETS: Dict[Severity, str] = {
    Severity.INFO: "log",
    Severity.DEBUG: "log",
    Severity.WARNING: "warning",
    Severity.EXCEPTION: "error",
    Severity.ERROR: "error",
}


def at_least(threshold: Severity) -> LevelMask:
    """Every real level at or above ``threshold``; empty for NONE."""
    return frozenset(s for s in ALL_LEVELS if s >= threshold)


def bucket_for(level: Severity) -> Optional[str]:
    return _BUCKETS.get(level)


def _parse_name(name: str, field: str) -> LevelMask:
    key = name.strip().upper()
    if key.startswith("LOG") and key[3:] in Severity.__members__:
        key = key[3:]
    if key in _ALIASES:
        return _ALIASES[key]
    if key in Severity.__members__:
        return frozenset({Severity[key]}) & ALL_LEVELS
    raise ConfigError(field, f"unknown severity {name!r}")


def parse_levels(value: LevelsLike, field: str = "levels") -> LevelMask:
    """Build a mask from a Severity, a name, 'WARNING|ERROR', or an iterable of those."""
    if value is None:
        return NO_LEVELS
    if isinstance(value, Severity):
        return frozenset({value}) & ALL_LEVELS
    if isinstance(value, str):
        mask: set[Severity] = set()
        for p in value.replace(",", "|").split("|"):
            mask |= _parse_name(p, field)
        return frozenset(mask)
    try:
        items = list(value)
    except TypeError:
        raise ConfigError(field, f"expected severities, got {type(value).__name__}") from None
    mask = set()
    for item in items:
        mask |= parse_levels(item, field)
    return frozenset(mask)


def format_levels(mask: Iterable[Severity]) -> str:
    names = [s.name for s in sorted(set(mask)) if s is not Severity.NONE]
    return "|".join(names) if names else "NONE"


__all__ = [
    "Severity", "LevelMask", "ALL_LEVELS", "NO_LEVELS",
    "at_least", "bucket_for", "parse_levels", "format_levels",
]
