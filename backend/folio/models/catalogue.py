"""Catalogue ORM — durable base URI, administrator, URI overrides and event log.

Invariants:
    - catalogue_settings holds at most one row (id = 1); its absence means "never seeded"
    - administrator NULL on an existing row means renounced
    - token_uri_overrides is keyed by the token id's decimal string; rows are upserted, never deleted
    - catalogue_events.position is the event's offset: dense, starting at 0, never reused

Design Decisions:
    - JSON column for event payloads: stores to_payload() as-is (ADR: same as message_history)
    - Explicit position over autoincrement: offsets must match the in-memory EventLog exactly
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base

SETTINGS_ROW_ID = 1


class CatalogueSettings(Base):
    """Singleton row: current base URI and administrator."""
    __tablename__ = "catalogue_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    base_uri: Mapped[str] = mapped_column(Text, nullable=False, default="")
    administrator: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class TokenUriOverride(Base):
    """Explicit metadata URI for one token id."""
    __tablename__ = "token_uri_overrides"

    token_id: Mapped[str] = mapped_column(String(78), primary_key=True)
    uri: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class CatalogueEventRecord(Base):
    """One catalogue event at its log offset."""
    __tablename__ = "catalogue_events"

    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    kind: Mapped[str] = mapped_column(String(40), nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
