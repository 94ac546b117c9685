"""Resolver classes combined into the root types by ``graphql_api.schema``."""
