"""Owning character cursors over UTF-8 text.

An owning cursor takes the text buffer it walks. It can be returned from a
function or stored in a long-lived object without keeping the original
buffer alive anywhere else.

Design Philosophy:
    - The buffer is never mutated; only two integer cursors move
    - No self-reference: views (as_str/as_bytes) are sliced on demand
    - Front cursor only increases, back cursor only decreases
    - front == back is the sole exhaustion condition, and it is permanent
    - Offsets are UTF-8 byte offsets, not character indices

Iteration Parity:
    Forward iteration yields exactly what iter(text) yields for the same
    text. OwnedCharIndices pairs each character with its byte offset in
    text.encode("utf-8").

Python 3.13+. Zero external dependencies.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, Self, TypeAlias, TypeVar

from ownedchars.codec.utf8 import decode_backward, decode_forward, decode_slice
from ownedchars.constants import DEFAULT_ENCODING, MAX_UTF8_WIDTH
from ownedchars.diagnostics import BufferEncodingError, BufferTypeError, ErrorTemplate

__all__ = ["OwnedCharIndices", "OwnedChars", "TextBuffer"]

logger = logging.getLogger(__name__)

TextBuffer: TypeAlias = str | bytes

T = TypeVar("T")


class _OwnedCursor(ABC, Generic[T]):
    """Shared double-ended cursor machinery.

    Subclasses only decide what an item looks like via _item().

    Thread Safety:
        None. One logical owner at a time; external locking otherwise.
    """

    __slots__ = ("_back", "_buffer", "_data", "_front")

    def __init__(self, buffer: TextBuffer) -> None:
        """Take ownership of buffer.

        Args:
            buffer: Text to walk. str is encoded to UTF-8 once; bytes must
                already hold valid UTF-8 and is used as-is.

        Raises:
            BufferTypeError: If buffer is neither str nor bytes
            BufferEncodingError: If a str buffer holds a lone surrogate
        """
        if isinstance(buffer, str):
            try:
                data = buffer.encode(DEFAULT_ENCODING)
            except UnicodeEncodeError as exc:
                diagnostic = ErrorTemplate.unencodable_text(exc.start, ord(buffer[exc.start]))
                raise BufferEncodingError(diagnostic) from exc
        elif isinstance(buffer, bytes):
            data = buffer
        else:
            raise BufferTypeError(ErrorTemplate.unsupported_buffer_type(type(buffer).__name__))

        self._buffer: TextBuffer = buffer
        self._data: bytes = data
        self._front = 0
        self._back = len(data)
        logger.debug(
            "%s took ownership of %s buffer (%d bytes)",
            type(self).__name__,
            type(buffer).__name__,
            len(data),
        )

    @classmethod
    def from_buffer(cls, buffer: TextBuffer) -> Self:
        """Create a cursor that owns buffer. No decoding happens here."""
        return cls(buffer)

    @abstractmethod
    def _item(self, start: int, char: str) -> T:
        """Build the item yielded for char, which starts at byte offset start."""

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        """Yield the next item from the front.

        Raises:
            StopIteration: Once the cursors have met (and on every call after)
            CursorInvariantError: If the buffer is not valid UTF-8
        """
        start = self._front
        if start >= self._back:
            raise StopIteration
        char, width = decode_forward(self._data, start, self._back)
        self._front = start + width
        return self._item(start, char)

    def next_back(self) -> T | None:
        """Yield the next item from the back.

        Returns:
            The last unconsumed item, or None once the cursors have met

        Raises:
            CursorInvariantError: If the buffer is not valid UTF-8

        Example:
            >>> chars = OwnedChars("héllo")
            >>> chars.next_back()
            'o'
            >>> next(chars)
            'h'
            >>> chars.as_str()
            'éll'
        """
        if self._front >= self._back:
            return None
        start, char = decode_backward(self._data, self._back, self._front)
        self._back = start
        return self._item(start, char)

    def __reversed__(self) -> Iterator[T]:
        """Iterate from the back, sharing cursor state with forward iteration."""
        while (item := self.next_back()) is not None:
            yield item

    def count(self) -> int:
        """Consume the remaining items and return how many there were."""
        return sum(1 for _ in self)

    def last(self) -> T | None:
        """Consume the cursor and return its final item, or None if exhausted."""
        item = self.next_back()
        self._front = self._back
        return item

    def size_hint(self) -> tuple[int, int | None]:
        """Bounds on the number of remaining items.

        Returns:
            (lower, upper). Each character takes 1 to 4 bytes, so the
            remaining byte count bounds the character count from both sides
            without decoding anything.

        Example:
            >>> OwnedChars("héllo").size_hint()
            (2, 6)
        """
        remaining = self._back - self._front
        return ((remaining + MAX_UTF8_WIDTH - 1) // MAX_UTF8_WIDTH, remaining)

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    # ------------------------------------------------------------------
    # Views and unwrapping
    # ------------------------------------------------------------------

    def as_str(self) -> str:
        """Return the unconsumed text between the two cursors.

        Raises:
            CursorInvariantError: If the unconsumed bytes are not valid UTF-8

        Example:
            >>> chars = OwnedChars("héllo")
            >>> next(chars), next(chars)
            ('h', 'é')
            >>> chars.as_str()
            'llo'
        """
        return decode_slice(self._data, self._front, self._back)

    def as_bytes(self) -> bytes:
        """Return the unconsumed UTF-8 bytes between the two cursors."""
        return self._data[self._front : self._back]

    def into_inner(self) -> TextBuffer:
        """Give the buffer back.

        Returns the full original buffer (the very object passed in), not
        just the unconsumed part. Characters already yielded are still in
        it; only cursor progress is discarded. The cursor is exhausted
        afterwards.

        Example:
            >>> chars = OwnedChars("héllo")
            >>> next(chars), next(chars)
            ('h', 'é')
            >>> chars.into_inner()
            'héllo'
        """
        logger.debug(
            "%s released its buffer after consuming %d of %d bytes",
            type(self).__name__,
            len(self._data) - (self._back - self._front),
            len(self._data),
        )
        self._front = self._back
        return self._buffer

    def __repr__(self) -> str:
        remaining = self._data[self._front : self._back].decode(DEFAULT_ENCODING, errors="replace")
        return f"{type(self).__name__}({remaining!r}, front={self._front}, back={self._back})"


class OwnedChars(_OwnedCursor[str]):
    """Owning iterator over the characters of a text buffer.

    Example:
        >>> list(OwnedChars("héllo"))
        ['h', 'é', 'l', 'l', 'o']
        >>> chars = OwnedChars("héllo")
        >>> "".join(reversed(chars))
        'olléh'
    """

    __slots__ = ()

    def _item(self, start: int, char: str) -> str:
        return char


class OwnedCharIndices(_OwnedCursor[tuple[int, str]]):
    """Owning iterator over (byte offset, character) pairs of a text buffer.

    Offsets are positions in the UTF-8 encoding of the original buffer and
    are unaffected by how much has already been consumed.

    Example:
        >>> list(OwnedCharIndices("héllo"))
        [(0, 'h'), (1, 'é'), (3, 'l'), (4, 'l'), (5, 'o')]
    """

    __slots__ = ()

    def _item(self, start: int, char: str) -> tuple[int, str]:
        return (start, char)

    def offset(self) -> int:
        """Byte offset of the next character from the front.

        Equals the buffer's byte length once the front has reached the end.
        """
        return self._front
