"""
Test Fixtures
=============

Shared test data used across test categories.

Available fixtures:
- sample_texts: The scientist story and its extended variant, with
  the graph facts the suite asserts against

Usage:
    from tests.fixtures.sample_texts import EASY_TEXT, EXTENDED_TEXT
"""

from .sample_texts import EASY_TEXT, EXTENDED_TEXT, EASY_NODES

__all__ = [
    'EASY_TEXT',
    'EXTENDED_TEXT',
    'EASY_NODES',
]
