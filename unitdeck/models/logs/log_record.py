"""Log record model."""

from __future__ import annotations

from dataclasses import dataclass

from unitdeck.constants.values import DOWNLOAD_LINE_SEPARATOR


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One parsed log line.

    Attributes:
        timestamp: Timestamp text as emitted by the backend, or the local
            receipt time when the payload carried none.
        message: Log message text.
    """

    timestamp: str
    message: str

    def to_line(self) -> str:
        """Render the record the way downloaded log files store it."""
        return f"{self.timestamp}{DOWNLOAD_LINE_SEPARATOR}{self.message}"

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over timestamp and message."""
        needle = query.lower()
        return needle in self.message.lower() or needle in self.timestamp.lower()
