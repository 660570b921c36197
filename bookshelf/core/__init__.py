"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
