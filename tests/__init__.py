"""
Test suite for the Pi big-real engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
