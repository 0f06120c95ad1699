"""Base class for applications run by the engine."""

from __future__ import annotations


class App:
    """An application with enter, update and exit hooks.

    Subclasses override the ``on_*`` hooks; the engine calls the public methods.
    The default hooks keep track of how long the application has been updated.
    """

    elapsed_time: float = 0.0

    def enter(self) -> bool:
        """Start the application; returns whether it entered successfully."""
        return self.on_enter()

    def update(self, delta_time: float) -> None:
        """Advance the application by ``delta_time`` seconds."""
        self.on_update(delta_time)

    def exit(self) -> None:
        """Stop the application."""
        self.on_exit()

    def on_enter(self) -> bool:
        return True

    def on_update(self, delta_time: float) -> None:
        self.elapsed_time += delta_time

    def on_exit(self) -> None:
        self.elapsed_time = 0.0