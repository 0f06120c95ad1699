import os
import re
import sys
from datetime import date, datetime

import pytest

from auxengine import file_utils
from auxengine.ini import parse_ini


def test_create_file_at_path_makes_parents(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    result = file_utils.create_file_at_path(target)
    assert result == target
    assert file_utils.does_file_exist(target)


def test_create_file_at_path_keeps_content(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("kept", encoding="utf-8")
    file_utils.create_file_at_path(target)
    assert target.read_text(encoding="utf-8") == "kept"


def test_does_file_exist_false_for_missing(tmp_path):
    assert file_utils.does_file_exist(tmp_path / "nothing") is False


def test_create_directories_fails_when_present(tmp_path):
    target = tmp_path / "x" / "y"
    file_utils.create_directories(target)
    assert target.is_dir()
    with pytest.raises(FileExistsError):
        file_utils.create_directories(target)


def test_create_unique_directory_counts_up(tmp_path):
    base = str(tmp_path)
    first = file_utils.create_unique_directory(base, "out")
    second = file_utils.create_unique_directory(base, "out")
    third = file_utils.create_unique_directory(base, "out")
    assert first == f"{base}/out"
    assert second == f"{base}/out (1)"
    assert third == f"{base}/out (2)"
    assert all(os.path.isdir(path) for path in (first, second, third))


def test_create_unique_directory_missing_base(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_utils.create_unique_directory(str(tmp_path / "missing"), "out")


def test_delete_file_at_path(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x", encoding="utf-8")
    assert file_utils.delete_file_at_path(target) is True
    assert not target.exists()
    assert file_utils.delete_file_at_path(target) is False


def test_delete_file_at_path_refuses_full_directory(tmp_path):
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "f").write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        file_utils.delete_file_at_path(tmp_path / "d")


def test_delete_directory_removes_tree(tmp_path):
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "sub" / "f.txt").write_text("x", encoding="utf-8")
    assert file_utils.delete_directory(root) is True
    assert not root.exists()
    assert file_utils.delete_directory(root) is False


def test_directory_listing(tmp_path):
    (tmp_path / "b.txt").write_text("", encoding="utf-8")
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    assert file_utils.get_directory_files(tmp_path) == ["a.txt", "b.txt"]
    assert file_utils.get_subdirectories(tmp_path) == ["sub"]


def test_directory_listing_of_missing_dir(tmp_path):
    assert file_utils.get_directory_files(tmp_path / "none") == []
    assert file_utils.get_subdirectories(tmp_path / "none") == []


def test_duplicate_file_creates_parents_and_overwrites(tmp_path):
    source = tmp_path / "src.txt"
    source.write_text("new", encoding="utf-8")
    dest = tmp_path / "deep" / "dir" / "dst.txt"
    file_utils.duplicate_file(source, dest)
    assert dest.read_text(encoding="utf-8") == "new"
    source.write_text("newer", encoding="utf-8")
    file_utils.duplicate_file(source, dest)
    assert dest.read_text(encoding="utf-8") == "newer"


def test_duplicate_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_utils.duplicate_file(tmp_path / "absent", tmp_path / "dst")


def test_copy_directory_copies_tree(tmp_path):
    source = tmp_path / "src"
    (source / "inner" / "empty").mkdir(parents=True)
    (source / "top.txt").write_text("top", encoding="utf-8")
    (source / "inner" / "deep.txt").write_text("deep", encoding="utf-8")
    dest = tmp_path / "dst"
    file_utils.copy_directory(source, dest)
    assert (dest / "top.txt").read_text(encoding="utf-8") == "top"
    assert (dest / "inner" / "deep.txt").read_text(encoding="utf-8") == "deep"
    assert (dest / "inner" / "empty").is_dir()


def test_copy_directory_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_utils.copy_directory(tmp_path / "absent", tmp_path / "dst")


def test_copy_directory_source_is_file(tmp_path):
    source = tmp_path / "file.txt"
    source.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        file_utils.copy_directory(source, tmp_path / "dst")


def test_last_write_timestamp(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x", encoding="utf-8")
    moment = datetime(2024, 3, 9, 14, 5, 7).timestamp()
    os.utime(target, (moment, moment))
    assert file_utils.get_last_write_timestamp(target) == "2024-03-09 14:05:07"


def test_last_write_timestamp_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_utils.get_last_write_timestamp(tmp_path / "absent")


def test_get_date_is_today():
    result = file_utils.get_date()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", result)
    assert result == date.today().isoformat()


@pytest.mark.parametrize(
    "path, ext, expected",
    [
        ("config/AuxEngine.ini", ".ini", True),
        ("settings.INI", "ini", True),
        ("notes.txt", ".ini", False),
        ("archive.tar.csv", "CSV", True),
        ("noext", "", True),
        (".ini", ".ini", False),
    ],
)
def test_has_extension(path, ext, expected):
    assert file_utils.has_extension(path, ext) is expected


def test_create_ini_file_adds_sections_and_keeps_data(tmp_path):
    target = tmp_path / "config" / "AuxEngine.ini"
    target.parent.mkdir()
    target.write_text("[Window]\nwidth=800\n", encoding="utf-8")
    file_utils.create_ini_file(target, ["Window", "Graphics"])
    data = parse_ini(target.read_text(encoding="utf-8"))
    assert list(data) == ["window", "graphics"]
    assert data["window"]["width"] == "800"


def test_create_ini_file_new(tmp_path):
    target = tmp_path / "new" / "x.ini"
    file_utils.create_ini_file(target, ["Audio"])
    assert list(parse_ini(target.read_text(encoding="utf-8"))) == ["audio"]


def test_create_ini_file_rejects_wrong_extension(tmp_path):
    with pytest.raises(ValueError):
        file_utils.create_ini_file(tmp_path / "x.txt", ["s"])
    assert not (tmp_path / "x.txt").exists()


def test_create_ini_file_rejects_empty_sections(tmp_path):
    with pytest.raises(ValueError):
        file_utils.create_ini_file(tmp_path / "x.ini", [])


def test_create_csv_file_writes_headers(tmp_path):
    target = tmp_path / "data" / "scores.csv"
    file_utils.create_csv_file(target, ["name", "score"])
    assert target.read_text(encoding="utf-8") == "name,score\n"


def test_create_csv_file_truncates(tmp_path):
    target = tmp_path / "scores.csv"
    target.write_text("old,content\n1,2\n", encoding="utf-8")
    file_utils.create_csv_file(target, ["a"])
    assert target.read_text(encoding="utf-8") == "a\n"


def test_create_csv_file_validation(tmp_path):
    with pytest.raises(ValueError):
        file_utils.create_csv_file(tmp_path / "x.ini", ["a"])
    with pytest.raises(ValueError):
        file_utils.create_csv_file(tmp_path / "x.csv", [])


def test_executable_directory_holds_interpreter():
    result = file_utils.get_executable_directory()
    expected = os.path.dirname(os.path.abspath(sys.executable))
    assert os.path.realpath(result) == os.path.realpath(expected)


def test_app_data_linux_prefers_xdg(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", "/data")
    assert file_utils.get_local_app_data_directory("MyApp") == "/data/MyApp"


def test_app_data_linux_falls_back_to_home(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", "/home/someone")
    assert file_utils.get_local_app_data_directory("MyApp") == "/home/someone/.local/share/MyApp"


def test_app_data_darwin(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("HOME", "/Users/someone")
    assert file_utils.get_local_app_data_directory("") == "/Users/someone/Library/Application Support"


def test_app_data_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("LOCALAPPDATA", "C:/Local")
    assert file_utils.get_local_app_data_directory("MyApp") == "C:/Local/MyApp"


def test_app_data_unknown_location(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)
    assert file_utils.get_local_app_data_directory("MyApp") == ""