"""Engine settings kept in an INI file under the output directory."""

from __future__ import annotations

from .file_utils import create_ini_file
from .ini_parser import IniParser

CONFIG_FILE_NAME = "config/AuxEngine.ini"
WINDOW_SECTION = "Window"
GRAPHICS_SECTION = "Graphics"

DEFAULT_ENGINE_NAME = "AuxEngine"
DEFAULT_WINDOW_WIDTH = 256
DEFAULT_WINDOW_HEIGHT = 256
DEFAULT_MAX_FPS = 30


class EngineConfig:
    """Window and graphics settings read from ``<output_dir>config/AuxEngine.ini``.

    The file is created with its sections if missing; existing values are kept.
    """

    def __init__(self, output_dir: str = "") -> None:
        self.path = output_dir + CONFIG_FILE_NAME
        create_ini_file(self.path, [WINDOW_SECTION, GRAPHICS_SECTION])
        self._parser = IniParser(self.path)
        self._parser.read()

    def engine_name(self) -> str:
        return self._parser.get_string(WINDOW_SECTION, "name", DEFAULT_ENGINE_NAME)

    def window_width(self) -> int:
        return self._parser.get_integer(WINDOW_SECTION, "width", DEFAULT_WINDOW_WIDTH)

    def window_height(self) -> int:
        return self._parser.get_integer(WINDOW_SECTION, "height", DEFAULT_WINDOW_HEIGHT)

    def max_fps(self) -> int:
        return self._parser.get_integer(GRAPHICS_SECTION, "maxFPS", DEFAULT_MAX_FPS)