"""Services Layer — administrator-gated catalogue handlers.

Invariants:
    - Every mutating handler checks the administrator before touching state
    - Handlers split by concern (metadata, issuance, administration), max ~4 methods each

Design Decisions:
    - One handler file per concern for locality (ADR: no god objects)
"""
