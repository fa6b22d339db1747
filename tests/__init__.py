"""
Test suite for fps-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
