"""
Test suite for fintoolkit

Contains:
- tests/unit/          : Unit tests for individual engines, models and storage
"""
