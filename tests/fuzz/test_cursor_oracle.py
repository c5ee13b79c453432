"""Differential state machine fuzzer: OwnedCharIndices vs ShadowCursor.

Drives random sequences of front steps, back steps, partial reversed()
drains and unwrapping against both implementations and compares every
result.

For intensive fuzzing:
    pytest tests/fuzz/test_cursor_oracle.py -v --hypothesis-seed=0

Python 3.13+.
"""

from __future__ import annotations

from itertools import islice

import pytest
from hypothesis import settings
from hypothesis import strategies as st
from hypothesis.stateful import (
    RuleBasedStateMachine,
    initialize,
    invariant,
    precondition,
    rule,
)

from ownedchars import OwnedCharIndices, into_char_indices
from tests.strategies import text_widths

from .shadow_cursor import ShadowCursor

# Mark entire module as fuzz tests (excluded from normal test runs)
pytestmark = pytest.mark.fuzz


class CursorOracleStateMachine(RuleBasedStateMachine):
    """State machine for differential testing of OwnedCharIndices.

    Invariants:
    - The remaining view matches the shadow's unconsumed characters
    - size_hint brackets the shadow's remaining count
    - offset() matches the shadow's next front offset
    """

    def __init__(self) -> None:
        super().__init__()
        self.real: OwnedCharIndices | None = None
        self.shadow: ShadowCursor | None = None
        self.unwrapped = False

    @initialize(text=text_widths())
    def init_cursors(self, text: str) -> None:
        """Start both cursors over the same text."""
        self.real = into_char_indices(text)
        self.shadow = ShadowCursor(text)
        self.unwrapped = False

    @rule()
    def step_front(self) -> None:
        """next() agrees with the shadow."""
        assert self.real is not None and self.shadow is not None
        assert next(self.real, None) == self.shadow.next()

    @rule()
    def step_back(self) -> None:
        """next_back() agrees with the shadow."""
        assert self.real is not None and self.shadow is not None
        assert self.real.next_back() == self.shadow.next_back()

    @rule(n=st.integers(min_value=0, max_value=5))
    def drain_back(self, n: int) -> None:
        """Taking n items from reversed() agrees with n next_back() calls."""
        assert self.real is not None and self.shadow is not None
        expected = []
        for _ in range(n):
            item = self.shadow.next_back()
            if item is None:
                break
            expected.append(item)
        assert list(islice(reversed(self.real), n)) == expected

    @precondition(lambda self: not self.unwrapped)
    @rule()
    def unwrap(self) -> None:
        """into_inner returns the full original text at any point."""
        assert self.real is not None and self.shadow is not None
        assert self.real.into_inner() == self.shadow.text
        self.shadow.front = self.shadow.back
        self.unwrapped = True

    @invariant()
    def remaining_view_matches(self) -> None:
        """as_str is the shadow's unconsumed middle."""
        if self.real is None or self.shadow is None:
            return
        assert self.real.as_str() == self.shadow.remaining()

    @invariant()
    def size_hint_brackets_remaining(self) -> None:
        """size_hint bounds the shadow's remaining count."""
        if self.real is None or self.shadow is None:
            return
        lower, upper = self.real.size_hint()
        remaining = self.shadow.back - self.shadow.front
        assert upper is not None
        assert lower <= remaining <= upper

    @precondition(lambda self: not self.unwrapped)
    @invariant()
    def offset_matches(self) -> None:
        """offset() is the shadow's next front offset."""
        if self.real is None or self.shadow is None:
            return
        assert self.real.offset() == self.shadow.offset()


TestCursorOracle = CursorOracleStateMachine.TestCase
TestCursorOracle.settings = settings.get_profile("stateful")
