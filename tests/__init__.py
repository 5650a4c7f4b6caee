"""
Test suite for polysecret

Contains:
- tests/unit/          : Unit tests for core math, domain models, contracts
                         and the recovery layer
"""
