"""SQL Catalogue Store — CatalogueStore implementation over the catalogue tables.

Invariants:
    - record() writes the event row and its state effect, then commits exactly once
    - record() commits whatever the ledger staged on the same session: credits and event
      land together or not at all
    - On failure the session is rolled back and DatabaseError raised; nothing partial persists
    - load() returns None until seed() has run once

Design Decisions:
    - Store bound to the request-scoped AsyncSession shared with SqlLedgerRepository
      (ADR: FastAPI caches get_db per request, so both see one transaction)
    - State rows derived from the event itself: one code path for every mutation kind
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.catalogue_events import (
    AdministratorTransferred, BaseURISet, CatalogueEvent, TokenURISet,
    event_from_payload,
)
from folio.core.catalogue_snapshot import CatalogueSnapshot
from folio.core.domain_types import Address, TokenId
from folio.core.errors import DatabaseError
from folio.models.catalogue import (
    SETTINGS_ROW_ID, CatalogueEventRecord, CatalogueSettings, TokenUriOverride,
)

logger = logging.getLogger(__name__)


class SqlCatalogueStore:
    """Durable catalogue state backed by async SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def load(self) -> CatalogueSnapshot | None:
        settings = await self._db.get(CatalogueSettings, SETTINGS_ROW_ID)
        if settings is None:
            return None
        overrides = await self._db.execute(select(TokenUriOverride))
        events = await self._db.execute(
            select(CatalogueEventRecord).order_by(CatalogueEventRecord.position),
        )
        return CatalogueSnapshot(
            base_uri=settings.base_uri,
            administrator=(
                Address(settings.administrator) if settings.administrator else None
            ),
            overrides={
                TokenId(int(row.token_id)): row.uri
                for row in overrides.scalars()
            },
            events=[
                event_from_payload(row.kind, row.payload)
                for row in events.scalars()
            ],
        )

    async def seed(self, base_uri: str, administrator: Address | None) -> None:
        self._db.add(CatalogueSettings(
            id=SETTINGS_ROW_ID, base_uri=base_uri, administrator=administrator,
        ))
        await self._commit("seed")

    async def record(self, offset: int, event: CatalogueEvent) -> None:
        try:
            await self._apply_state_effect(event)
            self._db.add(CatalogueEventRecord(
                position=offset, kind=event.kind.value, payload=event.to_payload(),
            ))
        except SQLAlchemyError as e:
            await self._fail(e, event.kind.value)
        await self._commit(event.kind.value)

    async def _apply_state_effect(self, event: CatalogueEvent) -> None:
        if isinstance(event, TokenURISet):
            key = str(event.token_id)
            row = await self._db.get(TokenUriOverride, key)
            if row is None:
                self._db.add(TokenUriOverride(token_id=key, uri=event.uri))
            else:
                row.uri = event.uri
        elif isinstance(event, BaseURISet):
            (await self._settings()).base_uri = event.base_uri
        elif isinstance(event, AdministratorTransferred):
            (await self._settings()).administrator = event.new

    async def _settings(self) -> CatalogueSettings:
        row = await self._db.get(CatalogueSettings, SETTINGS_ROW_ID)
        if row is None:
            await self._db.rollback()
            raise DatabaseError("Catalogue settings not seeded", "record")
        return row

    async def _commit(self, operation: str) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, operation)

    async def _fail(self, error: SQLAlchemyError, operation: str) -> None:
        await self._db.rollback()
        logger.error(
            f"Catalogue write failed: {error}",
            extra={"event": operation},
        )
        raise DatabaseError("Catalogue write rolled back", operation)
