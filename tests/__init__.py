"""
Test suite for hashkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
