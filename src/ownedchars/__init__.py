"""ownedchars - Owning character iterators over UTF-8 text.

Moves a text buffer into an iterator that yields its Unicode scalar values
one at a time (optionally with UTF-8 byte offsets), forward and backward.
The iterator owns the buffer, so it can be returned or stored anywhere and
hands the full original buffer back on request.

Public API:
    into_chars - Move a buffer into an OwnedChars iterator
    into_char_indices - Move a buffer into an OwnedCharIndices iterator
    OwnedChars - Owning iterator yielding characters
    OwnedCharIndices - Owning iterator yielding (byte offset, character)

Exceptions:
    OwnedCharsError - Base exception class
    BufferTypeError - Buffer is neither str nor bytes
    BufferEncodingError - str buffer holds a lone surrogate
    CursorInvariantError - Decode attempted off a scalar-value boundary

Submodules:
    ownedchars.codec - UTF-8 forward/backward decoding on byte offsets
    ownedchars.diagnostics - Error types, codes and formatting
    ownedchars.constants - UTF-8 structural constants
"""

from .conversion import into_char_indices, into_chars
from .cursor import OwnedCharIndices, OwnedChars, TextBuffer
from .diagnostics import (
    BufferEncodingError,
    BufferTypeError,
    CursorInvariantError,
    OwnedCharsError,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("ownedchars")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BufferEncodingError",
    "BufferTypeError",
    "CursorInvariantError",
    "OwnedCharIndices",
    "OwnedChars",
    "OwnedCharsError",
    "TextBuffer",
    "__version__",
    "into_char_indices",
    "into_chars",
]
