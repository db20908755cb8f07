"""
Smoke Tests
===========

Quick sanity checks that verify the system basically works.
These tests should:
- Run in < 10 seconds total
- Cover critical paths only
- Fail fast if something is fundamentally broken

Run with: python -m pytest tests/smoke/ -v
"""
