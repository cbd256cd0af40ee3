"""Test suite for cqrs-factory.

Test structure:
- unit/: Unit tests - each module in isolation with mocked collaborators
- integration/: Integration tests - the real container driven end to end
"""
