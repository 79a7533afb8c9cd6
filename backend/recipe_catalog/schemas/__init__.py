"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Ingredient quantity validated with the same core predicate the store uses

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
