"""Fuzz testing infrastructure for noam.

This package contains:
- test_grammar_robustness: Arbitrary input against the JSON grammar and composites
- test_json_depth_exhaustion: Boundary testing for JSON nesting limits

Python 3.13+.
"""
