"""
Test suite for scale-converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
