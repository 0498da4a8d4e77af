"""
Learning bounded context - Application layer.

Contains use cases for study state:
- Progress: list, single upsert, bulk reconciliation
- Streak: read, record a review day
- Custom words: list, add, delete
"""
