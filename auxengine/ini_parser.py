"""Typed access to the sections and values of an INI file."""

from __future__ import annotations

import os
import re
from typing import Union

from .ini import IniFile, IniMap, IniStructure

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(1))


class IniParser:
    """An INI file together with the values read from or set for it."""

    def __init__(self, file_path: Union[str, os.PathLike] = "") -> None:
        self._file = IniFile(file_path)
        self._data = IniStructure()

    @property
    def data(self) -> IniStructure:
        """The sections currently held in memory."""
        return self._data

    def _raw(self, section: str, key: str) -> str:
        values = self._data.get(section)
        if values is None:
            return ""
        return values.get(key, "")

    def get_string(self, section: str, key: str, default: str = "") -> str:
        """Return the value, or ``default`` when it is missing or empty."""
        return self._raw(section, key) or default

    def get_integer(self, section: str, key: str, default: int = 0) -> int:
        """Return the leading integer of the value, or ``default`` when empty.

        Raises ``ValueError`` when the value does not start with an integer
        or does not fit in 32 bits.
        """
        raw = self._raw(section, key)
        return _leading_int(raw) if raw else default

    def get_float(self, section: str, key: str, default: float = 0.0) -> float:
        """Return the leading number of the value, or ``default`` when empty."""
        raw = self._raw(section, key)
        return _leading_float(raw) if raw else default

    def get_double(self, section: str, key: str, default: float = 0.0) -> float:
        """Same as :meth:`get_float`."""
        return self.get_float(section, key, default)

    def get_boolean(self, section: str, key: str, default: bool = False) -> bool:
        """Return whether the value is true/1/yes/on (any case), or ``default`` when empty."""
        raw = self._raw(section, key)
        if not raw:
            return default
        return raw.lower() in _TRUE_WORDS

    def sections(self) -> list[str]:
        """Names of all sections, in file order."""
        return list(self._data)

    def keys(self, section: str) -> list[str]:
        """Keys of ``section`` in file order; empty if the section is missing."""
        values = self._data.get(section)
        return list(values) if values is not None else []

    def has_section(self, section: str) -> bool:
        return section in self._data

    def has_value(self, section: str, key: str) -> bool:
        values = self._data.get(section)
        return values is not None and key in values

    def add_section(self, section: str) -> IniMap:
        """Ensure ``section`` exists and return it."""
        return self._data.section(section)

    def set(self, section: str, key: str, value: str) -> None:
        self._data.section(section)[key] = value

    def read(self) -> None:
        """Replace the data in memory with the contents of the file."""
        self._data = IniStructure()
        self._data = self._file.read()

    def write(self) -> None:
        """Write the data in memory to the file, keeping its comments and layout."""
        self._file.write(self._data)