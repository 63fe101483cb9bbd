"""
Domain Layer - Budgeting rules with no I/O.

Entities, value objects, aggregates and the watch lists that record what
changed, plus the repository interfaces implemented by infrastructure.
"""
