"""Logging to the console and to an output log file."""

from __future__ import annotations

import enum
import inspect
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

OUTPUT_FILE_NAME = "Output-Log.txt"


class LogLevel(enum.IntEnum):
    """Severity of a log record."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    TRACE = 4
    INFO = 5

    def label(self) -> str:
        """Return the text shown for this level in a record."""
        return _LABELS[self]


_LABELS = {
    LogLevel.NONE: "NONE",
    LogLevel.FATAL: "FATAL ERROR",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARNING: "WARNING",
    LogLevel.TRACE: "TRACE",
    LogLevel.INFO: "INFO",
}


@dataclass
class _LogState:
    output_path: str = ""


_state = _LogState()


def format_record(
    level: LogLevel,
    message: str,
    file_name: str,
    line: int,
    args: Sequence[Any] = (),
    now: datetime | None = None,
) -> str:
    """Build a record such as ``[05/15/22|21:33:51][INFO][file:12]: text\\n``."""
    now = now or datetime.now()
    stamp = now.strftime("[%m/%d/%y|%H:%M:%S]")
    text = message.format(*args)
    return f"{stamp}[{LogLevel(level).label()}][{file_name}:{line}]: {text}\n"


def _caller(depth: int) -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def debug_init(output_dir: str = "", init_message: str = "") -> None:
    """Create a fresh log file in ``output_dir`` holding ``init_message``."""
    _state.output_path = output_dir + OUTPUT_FILE_NAME
    path = Path(_state.output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.write(init_message + "\n")
    except OSError:
        return
    print(init_message)


def _write_file(record: str) -> None:
    try:
        with open(_state.output_path, "a", encoding="utf-8") as handle:
            handle.write(record)
    except OSError:
        return


def output_file_log(level: LogLevel, message: str, *args: Any) -> None:
    """Append a record to the log file; silently skipped if it cannot be opened."""
    file_name, line = _caller(1)
    _write_file(format_record(level, message, file_name, line, args))


def console_log(level: LogLevel, message: str, *args: Any) -> None:
    """Print a record to standard output."""
    file_name, line = _caller(1)
    print(format_record(level, message, file_name, line, args), end="")


def debug_log(level: LogLevel, message: str, *args: Any) -> None:
    """Write a record both to the log file and to the console."""
    file_name, line = _caller(1)
    now = datetime.now()
    record = format_record(level, message, file_name, line, args, now)
    _write_file(record)
    print(record, end="")