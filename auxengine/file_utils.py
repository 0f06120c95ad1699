"""File-system helpers: creating, copying and removing files and directories."""

from __future__ import annotations

import errno
import os
import shutil
import string
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable

from .csv_io import CsvWriter
from .debug_log import LogLevel, debug_log
from .ini_parser import IniParser

INI_EXT = ".ini"
CSV_EXT = ".csv"
TXT_EXT = ".txt"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def does_file_exist(file_path: str | os.PathLike) -> bool:
    return os.path.exists(file_path)


def create_file_at_path(file_path: str | os.PathLike) -> Path:
    """Create the file and its parent directories; existing content is kept."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8"):
        pass
    return path


def create_directories(dir_path: str | os.PathLike) -> None:
    """Create a directory and its parents; raises ``FileExistsError`` if it exists."""
    os.makedirs(dir_path)


def create_unique_directory(base_path: str, dir_name: str) -> str:
    """Create ``base_path/dir_name``, or ``dir_name (N)`` when taken; return its path."""
    target = f"{base_path}/{dir_name}"
    counter = 1
    while os.path.exists(target):
        target = f"{base_path}/{dir_name} ({counter})"
        counter += 1
    os.mkdir(target)
    return target


def delete_file_at_path(file_path: str | os.PathLike) -> bool:
    """Remove a file or empty directory; return False if nothing was there."""
    if not os.path.lexists(file_path):
        return False
    if os.path.isdir(file_path) and not os.path.islink(file_path):
        os.rmdir(file_path)
    else:
        os.remove(file_path)
    return True


def delete_directory(dir_path: str | os.PathLike) -> bool:
    """Remove a directory tree (or a file); return False if nothing was there."""
    if not os.path.lexists(dir_path):
        return False
    if os.path.isdir(dir_path) and not os.path.islink(dir_path):
        shutil.rmtree(dir_path)
    else:
        os.remove(dir_path)
    return True


def _entries(dir_path: str | os.PathLike, want_dirs: bool) -> list[str]:
    if not os.path.isdir(dir_path):
        return []
    with os.scandir(dir_path) as entries:
        return sorted(entry.name for entry in entries if entry.is_dir() == want_dirs)


def get_directory_files(dir_path: str | os.PathLike) -> list[str]:
    """Names of the non-directory entries of ``dir_path``; empty if it is missing."""
    return _entries(dir_path, want_dirs=False)


def get_subdirectories(dir_path: str | os.PathLike) -> list[str]:
    """Names of the subdirectories of ``dir_path``; empty if it is missing."""
    return _entries(dir_path, want_dirs=True)


def duplicate_file(source_file_path: str | os.PathLike, dest_file_path: str | os.PathLike) -> None:
    """Copy a file, creating the destination's directories and overwriting it."""
    destination = Path(dest_file_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source_file_path, destination)
    shutil.copymode(source_file_path, destination)


def copy_directory(source_dir_path: str | os.PathLike, dest_dir_path: str | os.PathLike) -> None:
    """Copy a directory tree into ``dest_dir_path``, overwriting existing files."""
    source = Path(source_dir_path)
    destination = Path(dest_dir_path)
    if not source.exists():
        raise FileNotFoundError(errno.ENOENT, "source directory not found", str(source))
    if not source.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, "source is not a directory", str(source))
    destination.mkdir(parents=True, exist_ok=True)

    for root, dirs, files in os.walk(source):
        root_path = Path(root)
        target_root = destination / root_path.relative_to(source)
        for name in dirs:
            (target_root / name).mkdir(parents=True, exist_ok=True)
        for name in files:
            path = root_path / name
            target = target_root / name
            if path.is_file():
                shutil.copyfile(path, target)
                shutil.copymode(path, target)
            else:
                debug_log(LogLevel.WARNING, "Failed to copy unknown file {} to target file {}", path, target)


def get_last_write_timestamp(path: str | os.PathLike) -> str:
    """Local modification time as ``YYYY-MM-DD HH:MM:SS``."""
    modified = os.stat(path).st_mtime
    return datetime.fromtimestamp(modified).strftime("%Y-%m-%d %H:%M:%S")


def get_date() -> str:
    """Today's local date as ``YYYY-MM-DD``."""
    return datetime.now().strftime("%Y-%m-%d")


def to_lowercase(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_TO_LOWER)


def to_uppercase(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_TO_UPPER)


def has_extension(file_path: str | os.PathLike, ext: str) -> bool:
    """Whether the file's extension equals ``ext`` (case-insensitive, dot optional)."""
    suffix = os.path.splitext(os.path.basename(os.fspath(file_path)))[1]
    target = to_lowercase(ext)
    if target and not target.startswith("."):
        target = "." + target
    return to_lowercase(suffix) == target


def create_ini_file(file_path: str | os.PathLike, sections: Iterable[str]) -> None:
    """Create an INI file holding ``sections``, keeping any data it already has."""
    sections = list(sections)
    if not has_extension(file_path, INI_EXT):
        raise ValueError(f"{file_path} does not have the extension {INI_EXT}")
    if not sections:
        raise ValueError(f"no sections given for {file_path}")
    create_file_at_path(file_path)
    parser = IniParser(file_path)
    parser.read()
    for section in sections:
        parser.add_section(section)
    parser.write()


def create_csv_file(file_path: str | os.PathLike, headers: Iterable[str]) -> None:
    """Create (or truncate) a CSV file holding just the header row."""
    headers = list(headers)
    if not has_extension(file_path, CSV_EXT):
        raise ValueError(f"{file_path} does not have the extension {CSV_EXT}")
    if not headers:
        raise ValueError(f"no headers given for {file_path}")
    create_file_at_path(file_path)
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        CsvWriter.from_csv(handle).write_row(headers)


def get_executable_directory() -> str:
    """Directory of the executable running this process."""
    return os.path.dirname(os.path.abspath(sys.executable))


def get_local_app_data_directory(app_name: str = "") -> str:
    """Per-user application data directory, with ``app_name`` appended if given.

    Returns an empty string when the location cannot be determined.
    """
    environ = os.environ
    if sys.platform == "win32":
        path = environ.get("LOCALAPPDATA", "")
    elif sys.platform == "darwin":
        home = environ.get("HOME")
        path = f"{home}/Library/Application Support" if home is not None else ""
    else:
        xdg = environ.get("XDG_DATA_HOME")
        if xdg is not None:
            path = xdg
        else:
            home = environ.get("HOME")
            path = f"{home}/.local/share" if home is not None else ""
    if path and app_name:
        path += "/" + app_name
    return path