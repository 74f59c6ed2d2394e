"""Catalog domain services.

Validates and coerces incoming field sets, then reads/writes through
mediadesk.db.repo. Routes map the outcomes onto HTTP responses.
"""
