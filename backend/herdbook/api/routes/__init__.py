"""Route Modules — one file per farm register.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Static paths (/export, /summary, /next-id) declared before /{key} paths
    - Register-specific rules (derived fields, status checks) applied here, CRUD delegated

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
