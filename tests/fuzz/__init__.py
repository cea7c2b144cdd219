"""Fuzz testing infrastructure for lexcursor.

This package contains:
- test_scanning_state_machine: RuleBasedStateMachine over TokenStream

Python 3.13+.
"""
