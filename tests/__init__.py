"""
Test suite for arithkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
