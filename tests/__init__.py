"""
Test suite for complexmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
