"""Pydantic Schemas — request/response validation for the register endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Enum fields use core/domain_types.py so stored values stay canonical

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Derived values (totals, due status) are response-only fields
"""
