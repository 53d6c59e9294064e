"""
Test suite for atansquare

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
