"""Bookshelf — server-rendered book catalog.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
