"""Fuzz testing infrastructure for ownedchars.

This package contains:
- shadow_cursor: List-backed reference model for differential testing
- test_cursor_oracle: State machine fuzzer using RuleBasedStateMachine

Python 3.13+.
"""
