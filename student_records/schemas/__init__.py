"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas serialize with camelCase wire names (aliases)
    - Request validation lives in core/validator.py, not here

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, records are domain state
"""
