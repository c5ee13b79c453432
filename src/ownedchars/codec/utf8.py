"""UTF-8 scalar-value decoding on an immutable byte buffer.

Single steps in both directions work on plain byte offsets: no slices are
taken and no intermediate str objects are built, so a step costs O(width)
regardless of buffer size. decode_slice is the bulk path for views.

Validity:
    The buffer is assumed to hold valid UTF-8. Only the structure needed to
    keep cursors on scalar-value boundaries is checked (lead byte class,
    continuation tags, sequence length, shortest form, surrogate/range of
    the result). Any structural problem raises CursorInvariantError; a
    corrupted character is never returned.

Python 3.13+. Zero external dependencies.
"""

import logging
from typing import NoReturn

from ownedchars.constants import (
    ASCII_LIMIT,
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD_BITS,
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_TAG,
    DEFAULT_ENCODING,
    LEAD_2_MASK,
    LEAD_2_TAG,
    LEAD_3_MASK,
    LEAD_3_TAG,
    LEAD_4_MASK,
    LEAD_4_TAG,
    MAX_CONTINUATION_BYTES,
)
from ownedchars.diagnostics import CursorInvariantError, Diagnostic, ErrorTemplate

__all__ = [
    "decode_backward",
    "decode_forward",
    "decode_slice",
    "is_continuation_byte",
    "sequence_width",
]

logger = logging.getLogger(__name__)

# Payload bits carried by the lead byte, keyed by sequence width.
_LEAD_PAYLOAD_MASK: dict[int, int] = {
    2: ~LEAD_2_MASK & 0xFF,
    3: ~LEAD_3_MASK & 0xFF,
    4: ~LEAD_4_MASK & 0xFF,
}

# Smallest value each width may encode; anything below is overlong.
_MIN_CODE_POINT: dict[int, int] = {
    2: 0x80,
    3: 0x800,
    4: 0x10000,
}

_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF
_MAX_SCALAR = 0x10FFFF


def _fail(diagnostic: Diagnostic) -> NoReturn:
    logger.error("UTF-8 cursor invariant violated: %s", diagnostic.message)
    raise CursorInvariantError(diagnostic)


def is_continuation_byte(byte: int) -> bool:
    """Return True for 10xxxxxx bytes."""
    return byte & CONTINUATION_MASK == CONTINUATION_TAG


def sequence_width(lead: int) -> int:
    """Return the sequence width announced by a lead byte.

    Args:
        lead: First byte of a UTF-8 sequence

    Returns:
        1 to 4 for a valid lead byte, 0 for a byte that cannot start a
        sequence (continuation bytes and 0xF8..0xFF)

    Example:
        >>> sequence_width(ord("h"))
        1
        >>> sequence_width("é".encode()[0])
        2
        >>> sequence_width(0xA9)
        0
    """
    if lead < ASCII_LIMIT:
        return 1
    if lead & LEAD_2_MASK == LEAD_2_TAG:
        return 2
    if lead & LEAD_3_MASK == LEAD_3_TAG:
        return 3
    if lead & LEAD_4_MASK == LEAD_4_TAG:
        return 4
    return 0


def decode_forward(data: bytes, pos: int, limit: int) -> tuple[str, int]:
    """Decode the scalar value starting at pos.

    Args:
        data: UTF-8 encoded buffer
        pos: Byte offset of a lead byte (must be < limit)
        limit: Byte offset the sequence must not extend past

    Returns:
        (character, width in bytes)

    Raises:
        CursorInvariantError: If pos is not on a scalar-value boundary or the
            sequence starting there is structurally broken

    Example:
        >>> data = "héllo".encode()
        >>> decode_forward(data, 1, len(data))
        ('é', 2)
    """
    lead = data[pos]
    if lead < ASCII_LIMIT:
        return chr(lead), 1

    width = sequence_width(lead)
    if width == 0:
        if is_continuation_byte(lead):
            _fail(ErrorTemplate.stray_continuation_byte(pos, lead))
        _fail(ErrorTemplate.invalid_lead_byte(pos, lead))

    end = pos + width
    if end > limit:
        _fail(ErrorTemplate.truncated_sequence(pos, width, limit))

    code_point = lead & _LEAD_PAYLOAD_MASK[width]
    for i in range(pos + 1, end):
        byte = data[i]
        if not is_continuation_byte(byte):
            _fail(ErrorTemplate.malformed_continuation(i, byte))
        code_point = (code_point << CONTINUATION_PAYLOAD_BITS) | (byte & CONTINUATION_PAYLOAD_MASK)

    if code_point < _MIN_CODE_POINT[width]:
        _fail(ErrorTemplate.overlong_encoding(pos, width, code_point))
    if _SURROGATE_FIRST <= code_point <= _SURROGATE_LAST or code_point > _MAX_SCALAR:
        _fail(ErrorTemplate.invalid_scalar_value(pos, code_point))

    return chr(code_point), width


def decode_backward(data: bytes, end: int, limit: int) -> tuple[int, str]:
    """Decode the scalar value that ends right before end.

    Scans back over continuation bytes to the lead byte, then decodes
    forward from there.

    Args:
        data: UTF-8 encoded buffer
        end: Byte offset one past the sequence (must be > limit)
        limit: Byte offset the scan must not cross (the front cursor)

    Returns:
        (start offset of the character, character)

    Raises:
        CursorInvariantError: If no lead byte is found within reach or the
            sequence found does not end exactly at end

    Example:
        >>> data = "héllo".encode()
        >>> decode_backward(data, 3, 0)
        (1, 'é')
    """
    start = end - 1
    while is_continuation_byte(data[start]):
        if end - start > MAX_CONTINUATION_BYTES or start <= limit:
            _fail(ErrorTemplate.lead_byte_not_found(end))
        start -= 1

    char, width = decode_forward(data, start, end)
    if start + width != end:
        stray = start + width
        _fail(ErrorTemplate.stray_continuation_byte(stray, data[stray]))
    return start, char


def decode_slice(data: bytes, start: int, end: int) -> str:
    """Decode data[start:end] in one call.

    Raises:
        CursorInvariantError: If the slice is not valid UTF-8. The offset in
            the diagnostic is relative to data, not to the slice.

    Example:
        >>> decode_slice("héllo".encode(), 3, 6)
        'llo'
    """
    try:
        return data[start:end].decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as exc:
        offset = start + exc.start
        diagnostic = ErrorTemplate.undecodable_slice(offset, data[offset])
        logger.error("UTF-8 cursor invariant violated: %s", diagnostic.message)
        raise CursorInvariantError(diagnostic) from exc
