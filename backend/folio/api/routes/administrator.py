"""Administrator Routes — read, transfer and renounce the administrator role.

Invariants:
    - GET is public; transfer and renounce require X-Caller to be the current administrator
"""

from fastapi import APIRouter, Depends

from folio.api.dependencies import get_caller, get_store
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.schemas.catalogue import AdministratorTransferRequest
from folio.services.catalogue_state import CatalogueState, get_catalogue
from folio.services.handle_administration import AdministrationHandlers

router = APIRouter(prefix="/api/v1/administrator", tags=["administrator"])


@router.get("")
async def current_administrator(state: CatalogueState = Depends(get_catalogue)):
    return {"administrator": state.administrators.administrator}


@router.post("/transfer")
async def transfer_administrator(
    body: AdministratorTransferRequest,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    store: SqlCatalogueStore = Depends(get_store),
):
    event = await AdministrationHandlers(state, store).transfer(caller, body.new_administrator)
    return {"event": event.kind.value, **event.to_payload()}


@router.post("/renounce")
async def renounce_administrator(
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    store: SqlCatalogueStore = Depends(get_store),
):
    event = await AdministrationHandlers(state, store).renounce(caller)
    return {"event": event.kind.value, **event.to_payload()}
