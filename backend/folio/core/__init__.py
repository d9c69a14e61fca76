"""Core Layer — pure catalogue logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Codec functions are pure and deterministic
    - Stateful objects (resolver, administrator registry, event log) are plain dataclasses

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
