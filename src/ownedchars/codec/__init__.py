"""Byte-level codecs used by the owned cursors.

Python 3.13+.
"""

from .utf8 import (
    decode_backward,
    decode_forward,
    decode_slice,
    is_continuation_byte,
    sequence_width,
)

__all__ = [
    "decode_backward",
    "decode_forward",
    "decode_slice",
    "is_continuation_byte",
    "sequence_width",
]
