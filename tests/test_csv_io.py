import io

import pytest

from auxengine.csv_io import CsvReader, CsvWriter


@pytest.fixture(autouse=True)
def restore_decimal_places():
    yield
    CsvWriter.set_decimal_places(5)


class CountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_csv_writer_quotes_only_when_needed():
    stream = io.StringIO()
    CsvWriter.from_csv(stream).write_row(["a", "b,c", 'say "hi"', "x\ny"])
    assert stream.getvalue() == 'a,"b,c","say ""hi""","x\ny"\n'


def test_tsv_writer_uses_tabs():
    stream = io.StringIO()
    CsvWriter.from_tsv(stream).write_row(["a", "b,c"])
    assert stream.getvalue() == "a\tb,c\n"


def test_custom_delimiter_and_quote():
    stream = io.StringIO()
    CsvWriter(stream, delimiter=";", quotechar="'").write_row(["a;b", "c"])
    assert stream.getvalue() == "'a;b';c\n"


def test_numbers_use_decimal_places():
    stream = io.StringIO()
    writer = CsvWriter.from_csv(stream)
    writer.write_row([1, 2.5])
    CsvWriter.set_decimal_places(2)
    writer.write_row([2.5])
    assert stream.getvalue().splitlines() == ["1,2.50000", "2.50"]


def test_negative_decimal_places_rejected():
    with pytest.raises(ValueError):
        CsvWriter.set_decimal_places(-1)


def test_shift_operator_chains_rows():
    stream = io.StringIO()
    writer = CsvWriter.from_csv(stream)
    writer << ["a"] << ["b"]
    assert stream.getvalue() == "a\nb\n"


@pytest.mark.parametrize("flush, expected", [(True, 2), (False, 0)])
def test_flush_after_each_row(flush, expected):
    stream = CountingStream()
    writer = CsvWriter(stream, flush=flush)
    writer.write_row(["a"])
    writer.write_row(["b"])
    assert stream.flushes == expected


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "scores.csv"
    rows = [["name", "note"], ["ann", "likes, commas"], ["bob", 'quote "here"']]
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = CsvWriter.from_csv(handle)
        for row in rows:
            writer.write_row(row)

    reader = CsvReader(path)
    assert reader.column_names() == rows[0]
    assert list(reader) == [dict(zip(rows[0], row)) for row in rows[1:]]


def test_reader_guesses_delimiter(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a;b;c\n1;2;3\n4;5;6\n", encoding="utf-8")
    reader = CsvReader(path)
    assert reader.delimiter == ";"
    assert reader.column_names() == ["a", "b", "c"]
    assert [row["b"] for row in reader] == ["2", "5"]


def test_reader_explicit_delimiter(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("a\tb\n1\t2\n", encoding="utf-8")
    assert list(CsvReader(path, delimiter="\t")) == [{"a": "1", "b": "2"}]


def test_reader_skips_rows_of_wrong_width(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b\n1,2\n3\n4,5,6\n\n7,8\n", encoding="utf-8")
    assert [row["a"] for row in CsvReader(path)] == ["1", "7"]


def test_reader_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    reader = CsvReader(path)
    assert reader.column_names() == []
    assert list(reader) == []


def test_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvReader(tmp_path / "absent.csv")