"""
Settings bounded context - Application layer.

Resolves effective user settings and saves partial updates.
"""
