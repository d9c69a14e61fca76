"""Event Routes — ordered catalogue notifications for indexers.

Invariants:
    - Offsets are stable: an indexer resumes with ?since=<last offset + 1>
    - Events appear in the order their mutations were applied
"""

from fastapi import APIRouter, Depends, Query

from folio.schemas.catalogue import EventResponse
from folio.services.catalogue_state import CatalogueState, get_catalogue

router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.get("", response_model=list[EventResponse])
async def list_events(
    since: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    state: CatalogueState = Depends(get_catalogue),
):
    page = state.events.since(since, limit)
    return [
        EventResponse(offset=since + i, kind=event.kind.value, payload=event.to_payload())
        for i, event in enumerate(page)
    ]
