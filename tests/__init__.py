"""
Test suite for floatcodec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
