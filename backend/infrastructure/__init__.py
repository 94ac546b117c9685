"""Adapters for ports defined in the domain layer."""
