"""
Test suite for sdncal

Contains:
- tests/unit/          : Unit tests for calendar arithmetic, models,
                         contracts, conversion and the verification harness
"""
