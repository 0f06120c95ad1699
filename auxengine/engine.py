"""The engine: start-up, frame loop and shutdown of the running application."""

from __future__ import annotations

import abc
import enum
import time
from typing import Callable, ClassVar, Optional

from .app import App
from .config import EngineConfig
from .debug_log import LogLevel, debug_init, debug_log
from .engine_clock import EngineClock
from .input_handler import InputHandler, Key

BANNER = "\n".join(
    [
        "~" * 60,
        "    Aux Engine",
        "~" * 60,
    ]
)


class Mode(enum.IntEnum):
    """Whether the engine drives its own loop or is hosted by another program."""

    STANDALONE = 0
    AUXILIARY = 1


class WindowHandler(abc.ABC):
    """A window the engine draws into and receives events from."""

    @abc.abstractmethod
    def initialize_window(self, width: int, height: int, name: str) -> bool:
        """Open the window; returns whether it succeeded."""

    @abc.abstractmethod
    def is_window_open(self) -> bool:
        """Whether the window is still open."""

    @abc.abstractmethod
    def process_events(self) -> None:
        """Handle pending window events."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Close the window."""


class _HeadlessWindow(WindowHandler):
    """A window that exists only in memory."""

    def __init__(self) -> None:
        self.size: tuple[int, int] = (0, 0)
        self.name = ""
        self._open = False

    def initialize_window(self, width: int, height: int, name: str) -> bool:
        self.size = (width, height)
        self.name = name
        self._open = True
        return True

    def is_window_open(self) -> bool:
        return self._open

    def process_events(self) -> None:
        pass

    def shutdown(self) -> None:
        self._open = False


class Engine:
    """Owns the clock, configuration, window, input handler and application."""

    _instance: ClassVar[Optional["Engine"]] = None

    def __init__(
        self,
        input_handler: InputHandler | None = None,
        window_factory: Callable[[], WindowHandler] | None = None,
        clock: EngineClock | None = None,
    ) -> None:
        self._mode = Mode.STANDALONE
        self._running = False
        self._config: EngineConfig | None = None
        self._clock = clock or EngineClock()
        self._window_factory = window_factory or _HeadlessWindow
        self._window: WindowHandler | None = None
        self._input_handler = input_handler or InputHandler()
        self._app: App | None = App()

    @classmethod
    def get(cls) -> "Engine":
        """The shared engine, created on first use."""
        if Engine._instance is None:
            Engine._instance = cls()
        return Engine._instance

    @property
    def config(self) -> EngineConfig | None:
        return self._config

    @property
    def window(self) -> WindowHandler | None:
        return self._window

    @property
    def app(self) -> App | None:
        return self._app

    def start(self, mode: Mode = Mode.STANDALONE, output_dir: str = "") -> None:
        """Prepare the engine; in standalone mode load the config and open the window."""
        debug_init(output_dir, BANNER)
        debug_log(LogLevel.INFO, "Waking up...")

        self._mode = Mode(mode)
        self._running = False

        if self._mode is Mode.STANDALONE:
            debug_log(LogLevel.INFO, "Standalone mode activated. Please standby.")
            self._config = EngineConfig(output_dir)
            self._clock.fps = self._config.max_fps()

            self._window = self._window_factory()
            if not self._window.initialize_window(
                self._config.window_width(),
                self._config.window_height(),
                self._config.engine_name(),
            ):
                return
            if not self._input_handler.initialize(self._window):
                return
        else:
            debug_log(LogLevel.INFO, "Auxiliary mode activated. Please standby.")

        self._running = True
        debug_log(LogLevel.INFO, "Wake up protocol complete!")

    def load_app(self, app: App | None) -> bool:
        """Replace the application and enter it; returns whether entering succeeded."""
        if app is None:
            return False
        self._app = app
        return app.enter()

    def run(self) -> None:
        """In standalone mode, run frames until stopped, then shut down."""
        if self._mode is not Mode.STANDALONE:
            return
        while self._running:
            self._clock.update_frame_ticks()
            self.update(self._clock.delta_time())
            time.sleep(self._clock.sleep_time(self._clock.fps) / 1000.0)
        self.shutdown()

    def update(self, delta_time: float) -> None:
        """Advance one frame; pressing Escape stops the engine."""
        if self._window is not None:
            self._window.process_events()
        self._input_handler.update(delta_time)
        if self._app is not None:
            self._app.update(delta_time)
        if self._input_handler.is_key_down(Key.ESCAPE):
            self._running = False

    def is_running(self) -> bool:
        return self._running

    def is_standalone(self) -> bool:
        return self._mode is Mode.STANDALONE

    def shutdown(self) -> None:
        """Exit the application, close the window and drop the configuration."""
        debug_log(LogLevel.INFO, "Shutting down...")
        self._running = False
        if self._app is not None:
            self._app.exit()
            self._app = None
        if self._window is not None:
            self._window.shutdown()
            self._window = None
        self._config = None
        debug_log(LogLevel.INFO, "Night, night.")

    def input_handler(self) -> InputHandler:
        return self._input_handler

    def clock(self) -> EngineClock:
        return self._clock