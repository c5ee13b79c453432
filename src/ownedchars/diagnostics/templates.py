"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

_BOUNDARY_HINT = (
    "Cursors must only stop on scalar-value boundaries; is the buffer valid UTF-8?"
)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # BUFFER ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unsupported_buffer_type(type_name: str) -> Diagnostic:
        """Buffer handed to a conversion entry point is not str or bytes.

        Args:
            type_name: Name of the rejected type

        Returns:
            Diagnostic for UNSUPPORTED_BUFFER_TYPE
        """
        msg = f"Cannot take ownership of {type_name}; expected str or bytes"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_BUFFER_TYPE,
            message=msg,
            hint="Convert bytearray or memoryview buffers with bytes() first",
        )

    @staticmethod
    def unencodable_text(index: int, code_point: int) -> Diagnostic:
        """str buffer holds a lone surrogate, which UTF-8 cannot encode.

        Args:
            index: Character index of the surrogate in the str
            code_point: The surrogate code point

        Returns:
            Diagnostic for UNENCODABLE_TEXT
        """
        msg = f"Character U+{code_point:04X} at index {index} cannot be encoded as UTF-8"
        return Diagnostic(
            code=DiagnosticCode.UNENCODABLE_TEXT,
            message=msg,
            hint="Lone surrogates usually come from surrogateescape decoding; "
            "pass the original bytes instead",
        )

    # =========================================================================
    # CURSOR ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def stray_continuation_byte(offset: int, byte_value: int) -> Diagnostic:
        """Forward decode started on a continuation byte.

        Args:
            offset: Byte offset of the continuation byte
            byte_value: The byte found there

        Returns:
            Diagnostic for STRAY_CONTINUATION_BYTE
        """
        msg = f"Byte 0x{byte_value:02X} at offset {offset} is a continuation byte, not a lead byte"
        return Diagnostic(
            code=DiagnosticCode.STRAY_CONTINUATION_BYTE,
            message=msg,
            offset=offset,
            byte_value=byte_value,
            hint=_BOUNDARY_HINT,
        )

    @staticmethod
    def invalid_lead_byte(offset: int, byte_value: int) -> Diagnostic:
        """Byte can never start a UTF-8 sequence (0xF8..0xFF).

        Args:
            offset: Byte offset of the invalid byte
            byte_value: The byte found there

        Returns:
            Diagnostic for INVALID_LEAD_BYTE
        """
        msg = f"Byte 0x{byte_value:02X} at offset {offset} is not a valid UTF-8 lead byte"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD_BYTE,
            message=msg,
            offset=offset,
            byte_value=byte_value,
            hint=_BOUNDARY_HINT,
        )

    @staticmethod
    def truncated_sequence(offset: int, width: int, limit: int) -> Diagnostic:
        """Sequence announced by the lead byte runs past the cursor limit.

        Args:
            offset: Byte offset of the lead byte
            width: Width announced by the lead byte
            limit: Byte offset the sequence was not allowed to cross

        Returns:
            Diagnostic for TRUNCATED_SEQUENCE
        """
        msg = (
            f"{width}-byte sequence at offset {offset} is truncated "
            f"by the boundary at offset {limit}"
        )
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_SEQUENCE,
            message=msg,
            offset=offset,
            hint=_BOUNDARY_HINT,
        )

    @staticmethod
    def malformed_continuation(offset: int, byte_value: int) -> Diagnostic:
        """Byte inside a multi-byte sequence is not a continuation byte.

        Args:
            offset: Byte offset of the unexpected byte
            byte_value: The byte found there

        Returns:
            Diagnostic for MALFORMED_CONTINUATION
        """
        msg = f"Expected a continuation byte at offset {offset}, found 0x{byte_value:02X}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_CONTINUATION,
            message=msg,
            offset=offset,
            byte_value=byte_value,
            hint=_BOUNDARY_HINT,
        )

    @staticmethod
    def lead_byte_not_found(end: int) -> Diagnostic:
        """Backward scan crossed too many continuation bytes.

        Args:
            end: Byte offset the backward scan started from

        Returns:
            Diagnostic for LEAD_BYTE_NOT_FOUND
        """
        msg = f"No UTF-8 lead byte found within 4 bytes before offset {end}"
        return Diagnostic(
            code=DiagnosticCode.LEAD_BYTE_NOT_FOUND,
            message=msg,
            offset=end,
            hint=_BOUNDARY_HINT,
        )

    @staticmethod
    def invalid_scalar_value(offset: int, code_point: int) -> Diagnostic:
        """Decoded value is a surrogate or lies beyond U+10FFFF.

        Args:
            offset: Byte offset of the sequence
            code_point: The decoded (invalid) value

        Returns:
            Diagnostic for INVALID_SCALAR_VALUE
        """
        msg = f"Sequence at offset {offset} decodes to U+{code_point:04X}, not a scalar value"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SCALAR_VALUE,
            message=msg,
            offset=offset,
            hint="Surrogates and values above U+10FFFF are not Unicode scalar values",
        )

    @staticmethod
    def overlong_encoding(offset: int, width: int, code_point: int) -> Diagnostic:
        """Sequence spends more bytes than its value needs.

        Args:
            offset: Byte offset of the lead byte
            width: Width announced by the lead byte
            code_point: The decoded value

        Returns:
            Diagnostic for OVERLONG_ENCODING
        """
        msg = f"{width}-byte sequence at offset {offset} is an overlong encoding of U+{code_point:04X}"
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_ENCODING,
            message=msg,
            offset=offset,
            hint="UTF-8 requires the shortest form for every scalar value",
        )

    @staticmethod
    def undecodable_slice(offset: int, byte_value: int) -> Diagnostic:
        """Unconsumed bytes between the cursors are not valid UTF-8.

        Args:
            offset: Byte offset of the first undecodable byte
            byte_value: The byte found there

        Returns:
            Diagnostic for UNDECODABLE_SLICE
        """
        msg = f"Remaining text is not valid UTF-8 at offset {offset} (byte 0x{byte_value:02X})"
        return Diagnostic(
            code=DiagnosticCode.UNDECODABLE_SLICE,
            message=msg,
            offset=offset,
            byte_value=byte_value,
            hint="Use as_bytes() to inspect buffers that may not be valid UTF-8",
        )
