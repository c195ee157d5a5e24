"""
Test suite for textkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
