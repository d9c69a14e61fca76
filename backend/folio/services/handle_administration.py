"""Administration Handlers — transfer and renounce the administrator role.

Invariants:
    - Both operations are gated on the current administrator
    - Registry plans the change; it is applied only after store.record committed it
    - Renounce is permanent: no operation can set an administrator afterwards,
      and a restart restores the renounced (None) administrator, not the configured one

Design Decisions:
    - Registry returns the event, handler persists and applies it under the lock
      (ADR: event ordering owned by the shell)
"""

import logging

from folio.core.catalogue_events import AdministratorTransferred
from folio.core.errors import UnauthorizedError
from folio.core.repository_protocols import CatalogueStore
from folio.services.catalogue_state import CatalogueState

logger = logging.getLogger(__name__)


class AdministrationHandlers:
    """Ownership lifecycle for the catalogue administrator."""

    def __init__(self, state: CatalogueState, store: CatalogueStore):
        self._state = state
        self._store = store

    async def transfer(
        self, caller: str | None, new_administrator: str,
    ) -> AdministratorTransferred:
        async with self._state.lock:
            event = self._guarded(
                lambda: self._state.administrators.plan_transfer(caller, new_administrator),
                caller,
            )
            await self._store.record(self._state.next_offset(), event)
            self._state.apply(event)
        logger.info(
            f"Administrator transferred to {new_administrator!r}",
            extra={"caller": caller, "event": event.kind.value},
        )
        return event

    async def renounce(self, caller: str | None) -> AdministratorTransferred:
        async with self._state.lock:
            event = self._guarded(
                lambda: self._state.administrators.plan_renounce(caller), caller,
            )
            await self._store.record(self._state.next_offset(), event)
            self._state.apply(event)
        logger.info(
            "Administrator renounced",
            extra={"caller": caller, "event": event.kind.value},
        )
        return event

    @staticmethod
    def _guarded(operation, caller: str | None) -> AdministratorTransferred:
        try:
            return operation()
        except UnauthorizedError:
            logger.warning(
                "Rejected administrator change from non-administrator",
                extra={"caller": caller, "error_code": "UNAUTHORIZED"},
            )
            raise
