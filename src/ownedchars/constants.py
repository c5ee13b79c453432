"""Shared constants for ownedchars.

This module provides centralized UTF-8 structural constants used by the
codec and cursor packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Encoding: The byte encoding owned buffers are walked in
- Lead bytes: Masks and tags that classify the first byte of a sequence
- Continuation bytes: Mask and tag for the 10xxxxxx trailing bytes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Encoding
    "DEFAULT_ENCODING",
    "MAX_UTF8_WIDTH",
    # Lead bytes
    "ASCII_LIMIT",
    "LEAD_2_MASK",
    "LEAD_2_TAG",
    "LEAD_3_MASK",
    "LEAD_3_TAG",
    "LEAD_4_MASK",
    "LEAD_4_TAG",
    # Continuation bytes
    "CONTINUATION_MASK",
    "CONTINUATION_TAG",
    "CONTINUATION_PAYLOAD_BITS",
    "CONTINUATION_PAYLOAD_MASK",
    "MAX_CONTINUATION_BYTES",
]

# ============================================================================
# ENCODING
# ============================================================================

# Owned buffers are always walked as UTF-8. A str buffer is encoded once at
# construction; a bytes buffer is assumed to already hold valid UTF-8.
DEFAULT_ENCODING: str = "utf-8"

# Longest UTF-8 sequence for a Unicode scalar value (U+10000..U+10FFFF).
MAX_UTF8_WIDTH: int = 4

# ============================================================================
# LEAD BYTES
# ============================================================================
#
# Width is determined by the high bits of the lead byte:
#
#   0xxxxxxx  -> 1 byte   (U+0000..U+007F)
#   110xxxxx  -> 2 bytes  (U+0080..U+07FF)
#   1110xxxx  -> 3 bytes  (U+0800..U+FFFF)
#   11110xxx  -> 4 bytes  (U+10000..U+10FFFF)
#
# Each MASK selects the tag bits; the complement of the MASK selects the
# payload bits carried by the lead byte.

ASCII_LIMIT: int = 0x80

LEAD_2_MASK: int = 0xE0
LEAD_2_TAG: int = 0xC0

LEAD_3_MASK: int = 0xF0
LEAD_3_TAG: int = 0xE0

LEAD_4_MASK: int = 0xF8
LEAD_4_TAG: int = 0xF0

# ============================================================================
# CONTINUATION BYTES
# ============================================================================

CONTINUATION_MASK: int = 0xC0
CONTINUATION_TAG: int = 0x80

# Every continuation byte contributes six payload bits.
CONTINUATION_PAYLOAD_BITS: int = 6
CONTINUATION_PAYLOAD_MASK: int = 0x3F

# A backward scan never needs to step over more than three continuation
# bytes before it reaches the lead byte.
MAX_CONTINUATION_BYTES: int = MAX_UTF8_WIDTH - 1
