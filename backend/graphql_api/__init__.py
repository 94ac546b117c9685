"""GraphQL API layer (strawberry)."""
