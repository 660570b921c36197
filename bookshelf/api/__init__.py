"""API Layer — FastAPI routes, templates and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Pages rendered from bookshelf/templates; failures rendered centrally

Design Decisions:
    - Thin routes delegate to the injected BookStore
"""
