"""
Test suite for advmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
