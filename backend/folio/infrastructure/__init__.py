"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports catalogue logic, only core types, errors and protocols
    - All SQLAlchemy failures are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Thin adapters implementing core Protocols (ADR: single responsibility)
"""
