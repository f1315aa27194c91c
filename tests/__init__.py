"""
Test suite for fractionlib

Contains:
- tests/unit/          : Unit tests for individual modules
"""
