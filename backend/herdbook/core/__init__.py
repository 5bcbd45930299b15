"""Core Layer — pure record-keeping rules: ids, derived fields, formatting, summaries.

Invariants:
    - Core NEVER imports from api/, services/ or infrastructure/
    - No IO: every function is deterministic given its arguments
"""
