"""Plan directory clean-ups without changing anything."""

__version__ = "0.1.0"