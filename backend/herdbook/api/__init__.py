"""API Layer — FastAPI routes, shared dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses, except export downloads

Design Decisions:
    - Thin routes delegate to services/record_store and core rules
"""
