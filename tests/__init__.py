"""
Test suite for linalg2d

Contains:
- tests/unit/          : Unit tests for individual modules
"""
