"""Persistence adapters shared by all bounded contexts."""
