"""Route Dependencies — caller identity, request-scoped ledger and catalogue store.

Invariants:
    - Missing X-Caller header yields caller None, which no administrator check accepts
    - Ledger and store share one DB session per request (get_db is cached per request),
      so a credit and its event commit in the same transaction
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.infrastructure.database import get_db
from folio.infrastructure.ledger_repository import SqlLedgerRepository


async def get_caller(
    x_caller: str | None = Header(None, alias="X-Caller"),
) -> str | None:
    return x_caller.strip() if x_caller else None


async def get_ledger(db: AsyncSession = Depends(get_db)) -> SqlLedgerRepository:
    return SqlLedgerRepository(db)


async def get_store(db: AsyncSession = Depends(get_db)) -> SqlCatalogueStore:
    return SqlCatalogueStore(db)
