"""Character readers and string helpers used by the JSON parser.

A reader exposes the character under the cursor (``current``), the one after
it (``next``) and a way to step forward (``move``).  Past the end of the input
both return ``"\\0"``, which the parser treats as the end of the text.
"""

from __future__ import annotations

from typing import IO, Union

from .jsonbuffer import Allocation, DynamicJsonBuffer

END = "\0"
"""Character returned once the input is exhausted."""

StringLike = Union[str, bytes, bytearray, None]


def _as_text(value: str | bytes | bytearray) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return value


def _as_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class CharReader:
    """Reads an in-memory string; ``None`` reads as an empty string."""

    def __init__(self, text: StringLike) -> None:
        self._text = "" if text is None else _as_text(text)
        self._pos = 0

    def _at(self, index: int) -> str:
        return self._text[index] if index < len(self._text) else END

    def move(self) -> None:
        """Step to the next character."""
        self._pos += 1

    def current(self) -> str:
        """Character under the cursor."""
        return self._at(self._pos)

    def next(self) -> str:
        """Character following the one under the cursor."""
        return self._at(self._pos + 1)


class StreamReader:
    """Reads a stream lazily, never taking more than it has looked at.

    Characters are pulled from the stream one at a time, only when
    ``current`` or ``next`` needs them, so whatever follows the parsed
    text stays in the stream.
    """

    def __init__(self, stream: IO) -> None:
        self._stream = stream
        self._current = END
        self._next = END

    def move(self) -> None:
        """Step to the next character."""
        self._current = self._next
        self._next = END

    def current(self) -> str:
        """Character under the cursor."""
        if self._current == END:
            self._current = self._read()
        return self._current

    def next(self) -> str:
        """Character following the current one; call ``current`` first."""
        if self._next == END:
            self._next = self._read()
        return self._next

    def _read(self) -> str:
        chunk = self._stream.read(1)
        if not chunk:
            return END
        if isinstance(chunk, (bytes, bytearray)):
            return chr(chunk[0])
        return chunk


def string_equals(value: StringLike, expected: StringLike) -> bool:
    """Whether two strings, given as text or bytes, hold the same text."""
    if value is None or expected is None:
        return value is None and expected is None
    return _as_bytes(value) == _as_bytes(expected)


def duplicate(value: StringLike, buffer: DynamicJsonBuffer) -> Allocation | None:
    """Copy a string, with its terminating zero byte, into ``buffer``.

    Returns the allocation holding the copy, or ``None`` for a null string.
    """
    if value is None:
        return None
    data = _as_bytes(value) + b"\0"
    allocation = buffer.alloc(len(data))
    allocation.view[:] = data
    return allocation