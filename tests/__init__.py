"""
Test suite for calendar-duration

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
