"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All database exceptions mapped to core/errors.py types
"""
