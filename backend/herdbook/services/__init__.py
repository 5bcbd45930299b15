"""Services Layer — database-facing record operations and export rendering.

Invariants:
    - Services never import from api/
    - Register-specific rules stay in routes; services are register-agnostic
"""
