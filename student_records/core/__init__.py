"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Errors are raised as typed exceptions (core/errors.py), never logged here

Design Decisions:
    - Functional core separated from the FastAPI shell: store, validator and
      query engine are testable without an HTTP client
"""
