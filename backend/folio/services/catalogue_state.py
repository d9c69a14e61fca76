"""Catalogue State — process-wide resolver, administrator and event log behind one lock.

Invariants:
    - Exactly one CatalogueState per process (initialized via init_catalogue)
    - Every mutating handler holds `lock` for its whole duration: mutations apply in total order
    - Reads (resolve, encode, decode) never take the lock
    - In-memory state is a cache of the catalogue tables: an event is applied here
      only after CatalogueStore.record committed it
    - Settings values seed the tables on first boot only; afterwards the stored state wins

Design Decisions:
    - Served from memory, persisted write-through: reads stay lock-free and IO-free
      (ADR: single-process uvicorn owns the tables it caches)
    - apply(event) is the one way to mutate: restore and live writes share the same code path
    - Module-level singleton mirrors db_manager: lifespan initializes, routes depend on get_catalogue
"""

import asyncio
import logging
from dataclasses import dataclass, field

from folio.core.administration import AdministratorRegistry
from folio.core.catalogue_events import (
    AdministratorTransferred, BaseURISet, CatalogueEvent, EventLog, TokenURISet,
)
from folio.core.catalogue_snapshot import CatalogueSnapshot
from folio.core.domain_types import Address
from folio.core.metadata_resolver import MetadataResolver
from folio.core.repository_protocols import CatalogueStore

logger = logging.getLogger(__name__)


@dataclass
class CatalogueState:
    resolver: MetadataResolver = field(default_factory=MetadataResolver)
    administrators: AdministratorRegistry = field(default_factory=AdministratorRegistry)
    events: EventLog = field(default_factory=EventLog)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def next_offset(self) -> int:
        return len(self.events)

    def apply(self, event: CatalogueEvent) -> int:
        """Apply the event's state effect, append it, and return its offset."""
        if isinstance(event, TokenURISet):
            self.resolver.set_uri(event.token_id, event.uri)
        elif isinstance(event, BaseURISet):
            self.resolver.set_base_uri(event.base_uri)
        elif isinstance(event, AdministratorTransferred):
            self.administrators.apply(event)
        return self.events.append(event)


def new_catalogue(base_uri: str = "", administrator: str | None = None) -> CatalogueState:
    return CatalogueState(
        resolver=MetadataResolver(base_uri=base_uri),
        administrators=AdministratorRegistry(
            administrator=Address(administrator) if administrator else None,
        ),
    )


def catalogue_from_snapshot(snapshot: CatalogueSnapshot) -> CatalogueState:
    return CatalogueState(
        resolver=MetadataResolver(
            base_uri=snapshot.base_uri, overrides=dict(snapshot.overrides),
        ),
        administrators=AdministratorRegistry(administrator=snapshot.administrator),
        events=EventLog(events=list(snapshot.events)),
    )


async def load_catalogue(
    store: CatalogueStore, base_uri: str = "", administrator: str | None = None,
) -> CatalogueState:
    """Restore the stored catalogue, seeding it from the given defaults on first boot."""
    snapshot = await store.load()
    if snapshot is None:
        await store.seed(base_uri, Address(administrator) if administrator else None)
        logger.info("Catalogue seeded from settings")
        return new_catalogue(base_uri, administrator)
    logger.info(
        f"Catalogue restored: {len(snapshot.overrides)} override(s), "
        f"{len(snapshot.events)} event(s)",
    )
    return catalogue_from_snapshot(snapshot)


# Singleton (initialized on startup)
catalogue: CatalogueState | None = None


async def init_catalogue(
    store: CatalogueStore, base_uri: str = "", administrator: str | None = None,
) -> CatalogueState:
    global catalogue
    catalogue = await load_catalogue(store, base_uri, administrator)
    return catalogue


def get_catalogue() -> CatalogueState:
    """FastAPI dependency for the process-wide catalogue."""
    if not catalogue:
        raise RuntimeError("Catalogue not initialized")
    return catalogue
