"""A small application engine core: clock, run loop, input bindings, logging and file formats."""

__version__ = "0.1.0"