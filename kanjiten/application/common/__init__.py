"""
Application common module.

Contains base classes for application layer:
- UnitOfWork: Transaction boundary port implemented by infrastructure
"""

from .unit_of_work import UnitOfWork

__all__ = [
    "UnitOfWork",
]
