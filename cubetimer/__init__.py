"""Terminal speedcubing timer: scrambles, a virtual cube, timing and a SQLite solve history."""

__version__ = "0.1.0"