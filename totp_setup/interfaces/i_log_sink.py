"""Log sink interface for setup generation (adapter pattern)."""

from typing import Protocol


class ILogSink(Protocol):
    """Interface for leveled log output.

    Levels are ``debug``, ``info``, ``warn`` and ``error``. Sinks may drop
    entries below their own threshold.
    """

    def log(self, level: str, message: str) -> None:
        """Write one entry at ``level``."""
        ...
