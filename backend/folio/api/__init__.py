"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Caller identity arrives in the X-Caller header and is passed through verbatim

Design Decisions:
    - Thin routes delegate to services/core (ADR: impureim sandwich)
"""
