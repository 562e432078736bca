"""
Console collaborators.

A sink exposes three message calls (log / warning / error) and one
exception call, each taking the payload and an opaque context handle.
ConsoleSink renders to a terminal stream with colorama; RecordingSink keeps
calls in memory for host consoles and tests.
"""
from __future__ import annotations
import os
import sys
import traceback
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, TextIO

from colorama import Fore, Style, just_fix_windows_console

from quicklog.core.types import markup_to_ansi, strip_markup


class Sink(Protocol):
    def log(self, message: str, context: Any = None) -> None: ...
    def warning(self, message: str, context: Any = None) -> None: ...
    def error(self, message: str, context: Any = None) -> None: ...
    def exception(self, error: BaseException, context: Any = None) -> None: ...


def _colors_disabled() -> bool:
    return os.environ.get('QUICKLOG_COLOR_DISABLED') == '1'


def _context_label(context: Any) -> str:
    name = getattr(context, "name", None)
    return str(name) if name is not None else repr(context)


class ConsoleSink:
    COLORS = {
        "log": "",
        "warning": Fore.YELLOW,
        "error": Fore.RED,
        "exception": Fore.RED,
    }
    TAGS = {"log": "LOG", "warning": "WARN", "error": "ERROR", "exception": "EXCEPTION"}

    def __init__(self, stream: Optional[TextIO] = None, ansi: bool = True):
        just_fix_windows_console()
        self._stream = stream
        self.ansi = ansi

    @property
    def stream(self) -> TextIO:
        # resolved per write so captured/redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def _use_ansi(self) -> bool:
        return self.ansi and not _colors_disabled()

    def _write(self, kind: str, text: str, context: Any):
        suffix = f" context={_context_label(context)}" if context is not None else ""
        if self._use_ansi():
            color = self.COLORS[kind]
            reset = Style.RESET_ALL if color else ""
            body = markup_to_ansi(text, reset=f"{Style.RESET_ALL}{color}")
            line = f"{color}[{self.TAGS[kind]}] {body}{suffix}{reset}"
        else:
            line = f"[{self.TAGS[kind]}] {strip_markup(text)}{suffix}"
        self.stream.write(line + "\n")

    def log(self, message: str, context: Any = None) -> None:
        self._write("log", message, context)

    def warning(self, message: str, context: Any = None) -> None:
        self._write("warning", message, context)

    def error(self, message: str, context: Any = None) -> None:
        self._write("error", message, context)

    def exception(self, error: BaseException, context: Any = None) -> None:
        text = "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")
        self._write("exception", text, context)


@dataclass
class SinkRecord:
    kind: str            # log / warning / error / exception
    payload: Any         # message string, or the error object for exceptions
    context: Any = None


class RecordingSink:
    """Keeps every call in order."""

    def __init__(self):
        self.records: List[SinkRecord] = []

    def log(self, message: str, context: Any = None) -> None:
        self.records.append(SinkRecord("log", message, context))

    def warning(self, message: str, context: Any = None) -> None:
        self.records.append(SinkRecord("warning", message, context))

    def error(self, message: str, context: Any = None) -> None:
        self.records.append(SinkRecord("error", message, context))

    def exception(self, error: BaseException, context: Any = None) -> None:
        self.records.append(SinkRecord("exception", error, context))

    def kinds(self) -> List[str]:
        return [r.kind for r in self.records]

    def messages(self) -> List[Any]:
        return [r.payload for r in self.records]

    def clear(self):
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["Sink", "ConsoleSink", "RecordingSink", "SinkRecord"]
