"""Conversion entry points that move a text buffer into an owning cursor.

Python 3.13+.
"""

from .cursor import OwnedCharIndices, OwnedChars, TextBuffer

__all__ = ["into_char_indices", "into_chars"]


def into_chars(buffer: TextBuffer) -> OwnedChars:
    """Take ownership of buffer and iterate over its characters.

    Args:
        buffer: str, or bytes holding valid UTF-8

    Returns:
        OwnedChars positioned before the first character

    Example:
        >>> chars = into_chars("héllo")
        >>> next(chars), next(chars)
        ('h', 'é')
    """
    return OwnedChars.from_buffer(buffer)


def into_char_indices(buffer: TextBuffer) -> OwnedCharIndices:
    """Take ownership of buffer and iterate over (byte offset, character) pairs.

    Args:
        buffer: str, or bytes holding valid UTF-8

    Returns:
        OwnedCharIndices positioned before the first character

    Example:
        >>> [offset for offset, _ in into_char_indices("héllo")]
        [0, 1, 3, 4, 5]
    """
    return OwnedCharIndices.from_buffer(buffer)
