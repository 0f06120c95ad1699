"""Reading and writing INI files with case-insensitive sections and keys.

Sections and keys are trimmed and lower-cased; leading and trailing
whitespace is ignored. Comments are lines starting with ``;`` and trailing
comments are allowed on section lines. A lazy write only changes what
differs from the file on disk, keeping its comments and formatting.
"""

from __future__ import annotations

import enum
import os
import string
import sys
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Union

WHITESPACE = " \t\n\r\f\v"
LINE_ENDING = "\r\n" if sys.platform == "win32" else "\n"

_UTF8_BOM = b"\xef\xbb\xbf"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineKind(enum.Enum):
    """What a single line of an INI file holds."""

    NONE = "none"
    COMMENT = "comment"
    SECTION = "section"
    KEYVALUE = "keyvalue"
    UNKNOWN = "unknown"


def _trim(text: str) -> str:
    return text.strip(WHITESPACE)


def normalize_key(key: str) -> str:
    """Trim whitespace and lower-case ASCII letters, as stored keys are."""
    return _trim(key).translate(_ASCII_LOWER)


class IniMap(MutableMapping):
    """Ordered mapping whose keys are compared after :func:`normalize_key`."""

    def __init__(self, items: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if items is not None:
            self.update(items)

    def __getitem__(self, key: str) -> Any:
        return self._data[normalize_key(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[normalize_key(key)] = value

    def __delitem__(self, key: str) -> None:
        normalized = normalize_key(key)
        if normalized not in self._data:
            raise KeyError(key)
        self._data.pop(normalized)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class IniStructure(IniMap):
    """Sections of an INI document, each an :class:`IniMap` of string values."""

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(value, IniMap):
            value = IniMap(value)
        super().__setitem__(key, value)

    def section(self, name: str) -> IniMap:
        """Return the named section, creating it empty if it is missing."""
        key = normalize_key(name)
        if key not in self._data:
            self._data[key] = IniMap()
        return self._data[key]


def parse_line(line: str) -> tuple[LineKind, str, str]:
    """Classify one line, returning ``(kind, name_or_key, value)``."""
    line = _trim(line)
    if not line:
        return LineKind.NONE, "", ""
    if line[0] == ";":
        return LineKind.COMMENT, "", ""
    if line[0] == "[":
        comment_at = line.find(";")
        if comment_at != -1:
            line = line[:comment_at]
        closing_at = line.rfind("]")
        if closing_at != -1:
            return LineKind.SECTION, _trim(line[1:closing_at]), ""
    equals_at = line.replace("\\=", "  ").find("=")
    if equals_at != -1:
        key = _trim(line[:equals_at]).replace("\\=", "=")
        value = _trim(line[equals_at + 1 :])
        return LineKind.KEYVALUE, key, value
    return LineKind.UNKNOWN, "", ""


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    return [line.replace("\0", "").replace("\r", "") for line in text.split("\n")]


def _read(text: str) -> tuple[IniStructure, list[str]]:
    """Parse ``text``, also returning the lines a lazy write works from."""
    data = IniStructure()
    kept: list[str] = []
    section = ""
    in_section = False
    for line in _split_lines(text):
        kind, key, value = parse_line(line)
        if kind is LineKind.SECTION:
            in_section = True
            section = key
            data.section(section)
        elif in_section and kind is LineKind.KEYVALUE:
            data.section(section)[key] = value
        if kind is LineKind.UNKNOWN or (kind is LineKind.KEYVALUE and not in_section):
            continue
        kept.append(line)
    return data, kept


def parse_ini(text: str) -> IniStructure:
    """Parse INI text; key-value lines before the first section are ignored."""
    return _read(text)[0]


def _entry(key: str, value: str, pretty: bool) -> str:
    separator = " = " if pretty else "="
    return key.replace("=", "\\=") + separator + _trim(value)


def generate_ini(data: Mapping[str, Mapping[str, str]], pretty: bool = False) -> str:
    """Render ``data`` as INI text, with no trailing line ending."""
    blocks = []
    for name, collection in data.items():
        lines = [f"[{name}]"]
        lines.extend(_entry(key, value, pretty) for key, value in collection.items())
        blocks.append(LINE_ENDING.join(lines))
    separator = LINE_ENDING * 2 if pretty else LINE_ENDING
    return separator.join(blocks)


def merge_lines(
    lines: list[str],
    data: IniStructure,
    original: IniStructure,
    pretty: bool = False,
) -> list[str]:
    """Return the lines of a file updated from ``original`` to ``data``.

    Unchanged lines and comments are kept, changed values are rewritten in
    place, removed keys and sections are dropped, new keys are added after the
    last key of their section and new sections are appended at the end.
    """
    output: list[str] = []
    section_current = ""
    parsing_section = False
    continue_to_next_section = False
    discard_next_empty = False
    write_new_keys = False
    last_key_line = 0

    index = 0
    while index < len(lines):
        line = lines[index]
        if not write_new_keys:
            kind, key, value = parse_line(line)
            if kind is LineKind.SECTION:
                if parsing_section:
                    write_new_keys = True
                    parsing_section = False
                    continue
                section_current = key
                if section_current in data:
                    parsing_section = True
                    continue_to_next_section = False
                    discard_next_empty = False
                    output.append(line)
                    last_key_line = len(output)
                else:
                    continue_to_next_section = True
                    discard_next_empty = True
                    index += 1
                    continue
            elif kind is LineKind.KEYVALUE:
                if continue_to_next_section:
                    index += 1
                    continue
                if section_current in data:
                    collection = data[section_current]
                    if key in collection:
                        output_value = collection[key]
                        if value == output_value:
                            output.append(line)
                        else:
                            output.append(_rewrite_value(line, _trim(output_value), pretty))
                        last_key_line = len(output)
            elif discard_next_empty and not line:
                discard_next_empty = False
            elif kind is not LineKind.UNKNOWN:
                output.append(line)

        if write_new_keys or index == len(lines) - 1:
            if section_current in data and section_current in original:
                known = original[section_current]
                additions = [
                    _entry(key, value, pretty)
                    for key, value in data[section_current].items()
                    if key not in known
                ]
                output[last_key_line:last_key_line] = additions
            if write_new_keys:
                write_new_keys = False
                continue
        index += 1

    for name, collection in data.items():
        if name in original:
            continue
        if pretty and output and output[-1]:
            output.append("")
        output.append(f"[{name}]")
        output.extend(_entry(key, value, pretty) for key, value in collection.items())
    return output


def _rewrite_value(line: str, value: str, pretty: bool) -> str:
    equals_at = line.replace("\\=", "  ").find("=")
    value_at = next(
        (pos for pos in range(equals_at + 1, len(line)) if line[pos] not in WHITESPACE),
        None,
    )
    head = line if value_at is None else line[:value_at]
    if pretty and value_at == equals_at + 1:
        head += " "
    return head + value


class IniFile:
    """An INI file on disk that can be read, generated or lazily written."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._path = os.fspath(path)

    @property
    def path(self) -> Path:
        if not self._path:
            raise ValueError("INI file has no path")
        return Path(self._path)

    def _load(self) -> tuple[str, bool]:
        raw = self.path.read_bytes()
        bom = raw.startswith(_UTF8_BOM)
        if bom:
            raw = raw[len(_UTF8_BOM) :]
        return raw.decode(_ENCODING, _ERRORS), bom

    def read(self) -> IniStructure:
        """Read and parse the file."""
        text, _ = self._load()
        return parse_ini(text)

    def generate(self, data: Mapping[str, Mapping[str, str]], pretty: bool = False) -> None:
        """Overwrite the file with ``data``."""
        self.path.write_bytes(generate_ini(data, pretty).encode(_ENCODING, _ERRORS))

    def write(self, data: IniStructure, pretty: bool = False) -> None:
        """Update the file to hold ``data``, keeping comments and formatting."""
        path = self.path
        if not path.exists():
            self.generate(data, pretty)
            return
        text, bom = self._load()
        original, lines = _read(text)
        output = merge_lines(lines, data, original, pretty)
        payload = LINE_ENDING.join(output).encode(_ENCODING, _ERRORS)
        path.write_bytes((_UTF8_BOM if bom else b"") + payload)