"""
Test suite for the cost parsing engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
