"""Balance ORM — units of one token id held by one holder.

Invariants:
    - (holder, token_id) is unique: one row per holding
    - amount >= 0, only ever incremented by the catalogue
    - token_id stored as its decimal string

Design Decisions:
    - String over Numeric for token_id: ids are uint256, past BIGINT and past
      what SQLite Numeric keeps exact (ADR: lossless round trip on every backend)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class Balance(Base):
    """One holder's balance of one token id."""
    __tablename__ = "balances"
    __table_args__ = (
        UniqueConstraint("holder", "token_id", name="uq_balances_holder_token"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    holder: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    token_id: Mapped[str] = mapped_column(String(78), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
