"""
Pytest Configuration and Shared Fixtures
=========================================

This module configures pytest for the textgraph test suite.
It provides:
- Path setup for importing textgraph modules
- Custom markers for test categorization
- Shared fixtures available to all tests

Test Categories (markers):
- @pytest.mark.unit: Fast, isolated unit tests
- @pytest.mark.integration: Component interaction tests
- @pytest.mark.smoke: Quick sanity checks

Usage:
    # Run only unit tests
    pytest -m unit

    # Run the smoke suite
    pytest tests/smoke/ -v
"""

import os
import sys

import pytest


# =============================================================================
# PATH SETUP
# =============================================================================

# Ensure the textgraph package is importable from any test directory
_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Fast, isolated unit tests (< 1s each)"
    )
    config.addinivalue_line(
        "markers", "integration: Component interaction tests"
    )
    config.addinivalue_line(
        "markers", "smoke: Quick sanity checks (< 10s total)"
    )


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def easy_graph():
    """WordGraph built from EASY_TEXT."""
    from tests.fixtures.sample_texts import EASY_TEXT
    from textgraph import WordGraph
    return WordGraph.from_text(EASY_TEXT)


@pytest.fixture
def extended_graph():
    """WordGraph built from EXTENDED_TEXT (adds a second bridge from 'a' to 'report')."""
    from tests.fixtures.sample_texts import EXTENDED_TEXT
    from textgraph import WordGraph
    return WordGraph.from_text(EXTENDED_TEXT)


# =============================================================================
# TEST COLLECTION HOOKS
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    Tests in tests/unit/ get @pytest.mark.unit, etc.
    """
    for item in items:
        test_path = str(item.fspath)

        if '/unit/' in test_path or '\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in test_path or '\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)
        elif '/smoke/' in test_path or '\\smoke\\' in test_path:
            item.add_marker(pytest.mark.smoke)
