"""Holding a parsed JSON document and looking up its top-level values."""

from __future__ import annotations

import json
import os
from typing import Any, Union


class JsonParser:
    """A JSON document parsed from text or from a file.

    A failed parse raises :class:`json.JSONDecodeError` and leaves the
    previously parsed document in place.
    """

    def __init__(self) -> None:
        self._data: Any = None

    @property
    def data(self) -> Any:
        """The parsed document; ``None`` before anything is parsed."""
        return self._data

    def parse_string(self, text: str) -> None:
        """Parse ``text`` as the new document."""
        self._data = json.loads(text)

    def parse_file(self, file_name: Union[str, os.PathLike]) -> None:
        """Parse the file ``file_name`` as the new document."""
        with open(file_name, encoding="utf-8") as handle:
            self._data = json.load(handle)

    def get_value(self, key: str) -> Any:
        """Return the top-level value under ``key``.

        Raises ``KeyError`` if it is missing and ``TypeError`` if the document
        is not an object.
        """
        if self._data is None:
            raise KeyError(key)
        if not isinstance(self._data, dict):
            raise TypeError(f"cannot look up {key!r} in a JSON {type(self._data).__name__}")
        return self._data[key]

    def contains(self, key: str) -> bool:
        """Whether the document is an object holding ``key``."""
        return isinstance(self._data, dict) and key in self._data