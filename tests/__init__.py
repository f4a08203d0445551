"""
Test suite for the oracle feed scanner and price gate

Contains:
- tests/unit/          : Unit tests for individual modules
"""
