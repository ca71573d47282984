"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas describe shape and types only; business rules live in core/
    - Separate from models: schemas are API contracts, models are persistence
"""
