"""In-editor log console with bounded history."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class MessageType(Enum):
    """Severity of a console message."""

    INFO = "INFO"
    ERROR = "ERROR"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogMessage:
    """A timestamped console entry."""

    message_type: MessageType
    content: str
    timestamp: datetime = field(default_factory=_utc_now)

    def __str__(self) -> str:
        return f"{self.timestamp:%Y-%m-%d %H:%M:%S} - [{self.message_type.value}] {self.content}"


class Terminal:
    """Keeps the most recent messages; a max_lines of 0 keeps everything."""

    def __init__(self, max_lines: int = 0) -> None:
        if max_lines < 0:
            raise ValueError("max_lines must not be negative")
        self._max_lines = max_lines
        self._content: deque[LogMessage] = deque(maxlen=max_lines or None)

    @property
    def max_lines(self) -> int:
        return self._max_lines

    @property
    def content(self) -> list[LogMessage]:
        return list(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[LogMessage]:
        return iter(self._content)

    def log(self, message: Any) -> None:
        self.add_message(MessageType.INFO, str(message))

    def log_error(self, message: Any) -> None:
        self.add_message(MessageType.ERROR, str(message))

    def add_message(self, message_type: MessageType, content: str) -> None:
        self._content.append(LogMessage(message_type, content))

    def messages(self, only_errors: bool = False) -> Iterator[LogMessage]:
        """Yield stored messages, optionally only the errors."""
        for message in self._content:
            if only_errors and message.message_type is not MessageType.ERROR:
                continue
            yield message

    def lines(self, only_errors: bool = False) -> list[str]:
        return [str(message) for message in self.messages(only_errors)]