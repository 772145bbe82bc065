"""eventbook: write-path validation and persistence for events and bookings.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
