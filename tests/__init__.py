"""
Test suite for Deci

Contains:
- tests/unit/          : Unit tests for individual modules
"""
