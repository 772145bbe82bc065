"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/, or db/
    - All functions are pure and deterministic (identifiers are passed in)

Design Decisions:
    - Functional core separated from imperative shell (services/ does the awaiting)
"""
