"""Shared domain event primitives."""

from domain.shared.events.base import DomainEvent

__all__ = ["DomainEvent"]
