"""Unit test configuration.

Unit tests use the shared in-memory fixtures from ``tests/conftest.py`` and
never start the application.
"""
