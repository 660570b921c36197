"""Pydantic Schemas — validation of submitted book fields.

Invariants:
    - Schemas validate at the store boundary (user input -> persisted row)

Design Decisions:
    - Separate from models: schemas are input contracts, models are persistence
"""
