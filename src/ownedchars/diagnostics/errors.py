"""ownedchars exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class OwnedCharsError(Exception):
    """Base exception for all ownedchars errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize OwnedCharsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class BufferTypeError(OwnedCharsError, TypeError):
    """Buffer handed to a conversion entry point is neither str nor bytes.

    A caller programming error. Also a TypeError, so generic type checks
    in calling code keep working.
    """


class BufferEncodingError(OwnedCharsError, ValueError):
    """str buffer cannot be encoded as UTF-8 (it holds a lone surrogate).

    Raised at construction so a cursor never owns text it cannot walk.
    Also a ValueError, matching the UnicodeEncodeError it replaces.
    """


class CursorInvariantError(OwnedCharsError):
    """A cursor was asked to decode off a scalar-value boundary.

    Never raised for valid Unicode text. Indicates either a buffer that is
    not valid UTF-8 or broken cursor arithmetic; in both cases iteration
    stops rather than returning a corrupted character.
    """
