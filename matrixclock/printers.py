"""Text sinks used when writing JSON out."""

from __future__ import annotations

from typing import TextIO


class StaticStringBuilder:
    """Writes into a fixed-size buffer that keeps room for a terminator.

    A buffer of ``size`` holds at most ``size - 1`` characters; whatever
    does not fit is dropped.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self._limit = size - 1
        self._text = ""

    def print(self, value: str) -> int:
        """Append as much of ``value`` as fits; return the count written."""
        room = self._limit - len(self._text)
        written = value[:room]
        self._text += written
        return len(written)

    @property
    def value(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text


class DummyPrint:
    """Discards text, only counting it; used to measure output length."""

    def __init__(self) -> None:
        self.length = 0

    def print(self, value: str) -> int:
        """Count ``value`` and return its length."""
        self.length += len(value)
        return len(value)


class StreamPrintAdapter:
    """Writes text to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def print(self, value: str) -> int:
        """Write ``value`` to the stream and return its length."""
        self._stream.write(value)
        return len(value)