"""
Test suite for slotmachine

Contains:
- tests/unit/   : Unit tests for individual modules
- tests/fakes.py: In-memory fakes for session collaborators
"""
