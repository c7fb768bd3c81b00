"""
Test suite for calckit

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
