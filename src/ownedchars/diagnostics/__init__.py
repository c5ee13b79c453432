"""Diagnostic system for ownedchars errors.

Provides structured error diagnostics with codes, byte offsets and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import BufferEncodingError, BufferTypeError, CursorInvariantError, OwnedCharsError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BufferEncodingError",
    "BufferTypeError",
    "CursorInvariantError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "OwnedCharsError",
]
