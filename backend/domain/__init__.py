"""Domain layer for the postboard backend.

Entities, events, validators and ports, decoupled from the GraphQL
presentation and from storage.
"""
