"""Post use cases: posts, comments and likes."""
