"""
Error classes for configuration problems.
The logging path itself never raises these.
"""
from __future__ import annotations

class QuickLogError(Exception):
    pass

class ConfigError(QuickLogError):
    def __init__(self, field: str, detail: str):
        super().__init__(f"Invalid value for {field}: {detail}")
        self.field = field
        self.detail = detail

class ColorFormatError(QuickLogError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"Not a #RRGGBB colour: {value!r}")
        self.value = value
