"""User domain module.

Registered accounts, credential checks and the identity claim carried by
bearer tokens.
"""
