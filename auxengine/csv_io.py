"""Reading and writing delimiter-separated files."""

from __future__ import annotations

import csv
import itertools
import os
from pathlib import Path
from typing import Any, ClassVar, Iterable, Iterator, TextIO, Union

_CANDIDATE_DELIMITERS = ",|\t;^"
_SNIFF_LINES = 100


def _guess_delimiter(lines: list[str], quotechar: str) -> str:
    best, best_score = _CANDIDATE_DELIMITERS[0], -1
    for candidate in _CANDIDATE_DELIMITERS:
        rows = [row for row in csv.reader(lines, delimiter=candidate, quotechar=quotechar) if row]
        if not rows:
            continue
        width = len(rows[0])
        score = sum(len(row) == width for row in rows) * width
        if score > best_score:
            best, best_score = candidate, score
    return best


class CsvReader:
    """Rows of a delimited file with a header line, as dictionaries.

    When no delimiter is given it is guessed from ``, | tab ; ^``. Rows whose
    number of fields differs from the header are skipped.
    """

    def __init__(
        self,
        file_path: Union[str, os.PathLike],
        delimiter: str | None = None,
        quotechar: str = '"',
    ) -> None:
        self._path = Path(file_path)
        self._quotechar = quotechar
        with self._open() as handle:
            sample = list(itertools.islice(handle, _SNIFF_LINES))
        self._delimiter = delimiter or _guess_delimiter(sample, quotechar)
        rows = (row for row in csv.reader(sample, **self._dialect()) if row)
        self._columns = next(rows, [])

    def _open(self) -> TextIO:
        return self._path.open(newline="", encoding="utf-8")

    def _dialect(self) -> dict[str, str]:
        return {"delimiter": self._delimiter, "quotechar": self._quotechar}

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def __iter__(self) -> Iterator[dict[str, str]]:
        with self._open() as handle:
            rows = (row for row in csv.reader(handle, **self._dialect()) if row)
            header = next(rows, None)
            if header is None:
                return
            for row in rows:
                if len(row) == len(header):
                    yield dict(zip(header, row))

    def column_names(self) -> list[str]:
        """Names from the header line."""
        return list(self._columns)


class CsvWriter:
    """Writes rows to a text stream, quoting fields only where needed."""

    decimal_places: ClassVar[int] = 5

    def __init__(
        self,
        stream: TextIO,
        delimiter: str = ",",
        quotechar: str = '"',
        flush: bool = True,
    ) -> None:
        self._stream = stream
        self._delimiter = delimiter
        self._quotechar = quotechar
        self._flush = flush

    @classmethod
    def from_csv(cls, stream: TextIO) -> "CsvWriter":
        """A comma-separated writer."""
        return cls(stream)

    @classmethod
    def from_tsv(cls, stream: TextIO) -> "CsvWriter":
        """A tab-separated writer."""
        return cls(stream, delimiter="\t")

    @classmethod
    def set_decimal_places(cls, places: int) -> None:
        """Set how many decimals floating-point fields are written with."""
        if places < 0:
            raise ValueError(f"decimal places must not be negative, got {places}")
        CsvWriter.decimal_places = places

    def _field(self, value: Any) -> str:
        if isinstance(value, float):
            text = f"{value:.{CsvWriter.decimal_places}f}"
        else:
            text = str(value)
        special = (self._delimiter, self._quotechar, "\r", "\n")
        if any(char in text for char in special):
            doubled = text.replace(self._quotechar, self._quotechar * 2)
            return f"{self._quotechar}{doubled}{self._quotechar}"
        return text

    def write_row(self, row: Iterable[Any]) -> "CsvWriter":
        """Write one row and return the writer, so calls can be chained."""
        self._stream.write(self._delimiter.join(self._field(value) for value in row) + "\n")
        if self._flush:
            self._stream.flush()
        return self

    def __lshift__(self, row: Iterable[Any]) -> "CsvWriter":
        return self.write_row(row)