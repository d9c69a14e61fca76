"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (caller input, API responses)
    - Non-negativity enforced here; the item < ITEM_MULTIPLIER rule stays in the codec

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
