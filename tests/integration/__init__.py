"""
Integration Tests
=================

End-to-end tests through TextGraphProcessor and the menu CLI.
These tests may:
- Read and write files in temporary directories
- Drive the menu loop with scripted input

Run with: python -m pytest tests/integration/ -v
"""
