"""SQL Ledger — LedgerRepository implementation over the balances table.

Invariants:
    - credit_unit / credit_batch stage and flush, never commit: CatalogueStore.record commits
      the credits together with the event that describes them
    - credit_batch is all-or-nothing: any failure rolls back every credit in the transaction
    - Repeated ids in one batch credit one unit per occurrence
    - balance_of returns 0 for holdings that were never credited

Design Decisions:
    - Repository bound to a request-scoped AsyncSession (ADR: get_db owns the session lifetime)
    - Read-modify-write per (holder, token_id) row; serialization of writers is the
      CatalogueState lock's job, not the repository's
"""

import logging
from collections import Counter
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.domain_types import Address, TokenId
from folio.core.errors import DatabaseError
from folio.models.balance import Balance

logger = logging.getLogger(__name__)


class SqlLedgerRepository:
    """Balance bookkeeping backed by async SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def credit_unit(self, token_id: TokenId, recipient: Address) -> None:
        await self.credit_batch([token_id], recipient)

    async def credit_batch(
        self, token_ids: Sequence[TokenId], recipient: Address,
    ) -> None:
        units = Counter(str(token_id) for token_id in token_ids)
        try:
            for token_key, amount in units.items():
                row = await self._get_row(recipient, token_key)
                if row is None:
                    self._db.add(Balance(
                        holder=recipient, token_id=token_key, amount=amount,
                    ))
                else:
                    row.amount += amount
            await self._db.flush()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Ledger credit failed: {e}",
                extra={"recipient": recipient, "batch_size": len(token_ids)},
            )
            raise DatabaseError("Ledger credit rolled back", "credit")

    async def balance_of(self, holder: Address, token_id: TokenId) -> int:
        row = await self._get_row(holder, str(token_id))
        return row.amount if row else 0

    async def balance_of_batch(
        self, holders: Sequence[Address], token_ids: Sequence[TokenId],
    ) -> list[int]:
        return [
            await self.balance_of(holder, token_id)
            for holder, token_id in zip(holders, token_ids)
        ]

    async def _get_row(self, holder: str, token_key: str) -> Balance | None:
        result = await self._db.execute(
            select(Balance).where(
                Balance.holder == holder, Balance.token_id == token_key,
            ),
        )
        return result.scalar_one_or_none()
