"""Post domain module.

Posts own two embedded collections: comments (most recent first) and
likes (at most one per username).
"""
