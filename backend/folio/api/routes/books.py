"""Book Routes — administrator-gated issuance of single books and batches.

Invariants:
    - 201 only after the ledger credit and its event committed together
    - Batch requests with mismatched arrays or one invalid item credit nothing
"""

from fastapi import APIRouter, Depends, status

from folio.api.dependencies import get_caller, get_ledger, get_store
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.infrastructure.ledger_repository import SqlLedgerRepository
from folio.schemas.catalogue import IssueBatchRequest, IssueRequest
from folio.services.catalogue_state import CatalogueState, get_catalogue
from folio.services.handle_issuance import IssuanceHandlers

router = APIRouter(prefix="/api/v1/books", tags=["books"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def issue_book(
    body: IssueRequest,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    ledger: SqlLedgerRepository = Depends(get_ledger),
    store: SqlCatalogueStore = Depends(get_store),
):
    """Mint one unit of (edition, item) to the recipient."""
    event = await IssuanceHandlers(state, ledger, store).issue(
        caller, body.recipient, body.edition, body.item,
    )
    return {"event": event.kind.value, **event.to_payload()}


@router.post("/batch", status_code=status.HTTP_201_CREATED)
async def issue_book_batch(
    body: IssueBatchRequest,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    ledger: SqlLedgerRepository = Depends(get_ledger),
    store: SqlCatalogueStore = Depends(get_store),
):
    """Mint one unit per (editions[i], items[i]) pair, all or nothing."""
    event = await IssuanceHandlers(state, ledger, store).issue_batch(
        caller, body.recipient, body.editions, body.items,
    )
    return {"event": event.kind.value, **event.to_payload()}
