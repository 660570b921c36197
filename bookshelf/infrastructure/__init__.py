"""Infrastructure Layer — database access, book persistence and logging.

Invariants:
    - Driver failures are mapped to core error types before leaving this layer
"""
