"""
Unit Tests
==========

Fast, isolated tests for individual textgraph modules.
These tests should:
- Run in < 1 second each
- Touch the filesystem only through tmp_path
- Never spawn Graphviz (subprocess is mocked)

Run with: python -m pytest tests/unit/ -v
"""
