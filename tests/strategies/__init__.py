"""Hypothesis strategies for ownedchars property-based testing.

Usage:
    from tests.strategies import unicode_text, text_step_plan
"""

from .text import (
    WIDTH_SAMPLES,
    boundary_chars,
    scalar_chars,
    text_step_plan,
    text_widths,
    unicode_text,
)

__all__ = [
    "WIDTH_SAMPLES",
    "boundary_chars",
    "scalar_chars",
    "text_step_plan",
    "text_widths",
    "unicode_text",
]
