"""Infrastructure Layer: database access, record stores, logging.

Invariants:
    - Infrastructure implements core protocols; it never re-validates records
    - All driver failures surface as core error types
"""
