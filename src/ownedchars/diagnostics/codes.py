"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Buffer errors (what was handed to a conversion entry point)
        2000-2999: Cursor errors (internal decode invariant violations)
    """

    # Buffer errors (1000-1999)
    UNSUPPORTED_BUFFER_TYPE = 1001
    UNENCODABLE_TEXT = 1002

    # Cursor errors (2000-2999)
    # All of these mean a cursor landed off a scalar-value boundary, which
    # only happens when the buffer is not valid UTF-8 or cursor arithmetic
    # is broken. They are never recoverable.
    STRAY_CONTINUATION_BYTE = 2001
    INVALID_LEAD_BYTE = 2002
    TRUNCATED_SEQUENCE = 2003
    MALFORMED_CONTINUATION = 2004
    LEAD_BYTE_NOT_FOUND = 2005
    INVALID_SCALAR_VALUE = 2006
    OVERLONG_ENCODING = 2007
    UNDECODABLE_SLICE = 2008


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Note:
        Offsets are UTF-8 byte offsets into the owned buffer, not character
        offsets. For multi-byte characters the two differ.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        offset: Byte offset where the problem was detected (None if not applicable)
        byte_value: The offending byte at offset (None if not applicable)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    offset: int | None = None
    byte_value: int | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[STRAY_CONTINUATION_BYTE]: Byte 0xA9 at offset 2 is a continuation byte
              --> byte 2 (0xA9)
              = help: Cursors must only stop on scalar-value boundaries

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
