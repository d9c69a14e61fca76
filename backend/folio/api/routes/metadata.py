"""Metadata Routes — resolve token URIs (public) and set base URI / overrides (administrator).

Invariants:
    - GET endpoints are unrestricted and never take the catalogue lock
    - PUT endpoints pass X-Caller to the handlers, which gate before mutating
    - Id-keyed and pair-keyed routes normalize to the same token id

Design Decisions:
    - Pair-keyed resources nested under /editions/{edition}/items/{item}
      mirror the (edition, item) overloads without duplicating logic
"""

from fastapi import APIRouter, Depends

from folio.api.dependencies import get_caller, get_store
from folio.core.domain_types import TokenId
from folio.core.token_codec import check_token_id, encode_token_id
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.schemas.catalogue import BaseURIUpdate, TokenURIResponse, TokenURIUpdate
from folio.services.catalogue_state import CatalogueState, get_catalogue
from folio.services.handle_metadata import MetadataHandlers

router = APIRouter(prefix="/api/v1", tags=["metadata"])


@router.get("/metadata/base-uri")
async def get_base_uri(state: CatalogueState = Depends(get_catalogue)):
    return {"base_uri": state.resolver.base_uri}


@router.put("/metadata/base-uri")
async def set_base_uri(
    body: BaseURIUpdate,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    store: SqlCatalogueStore = Depends(get_store),
):
    """Replace the base URI used for every token without an override."""
    event = await MetadataHandlers(state, store).set_base_uri(caller, body.base_uri)
    return {"event": event.kind.value, **event.to_payload()}


@router.get("/tokens/{token_id}/uri", response_model=TokenURIResponse)
async def resolve_by_token_id(
    token_id: int, state: CatalogueState = Depends(get_catalogue),
):
    """Override if set, else {base_uri}{token_id}.json."""
    check_token_id(token_id)
    uri = state.resolver.resolve(TokenId(token_id))
    return TokenURIResponse(token_id=str(token_id), uri=uri)


@router.put("/tokens/{token_id}/uri")
async def set_uri_by_token_id(
    token_id: int,
    body: TokenURIUpdate,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    store: SqlCatalogueStore = Depends(get_store),
):
    event = await MetadataHandlers(state, store).set_uri_by_token_id(
        caller, token_id, body.uri,
    )
    return {"event": event.kind.value, **event.to_payload()}


@router.get(
    "/editions/{edition}/items/{item}/uri", response_model=TokenURIResponse,
)
async def resolve_by_pair(
    edition: int, item: int, state: CatalogueState = Depends(get_catalogue),
):
    token_id = encode_token_id(edition, item)
    return TokenURIResponse(
        token_id=str(token_id), uri=state.resolver.resolve(token_id),
    )


@router.put("/editions/{edition}/items/{item}/uri")
async def set_uri_by_pair(
    edition: int,
    item: int,
    body: TokenURIUpdate,
    caller: str | None = Depends(get_caller),
    state: CatalogueState = Depends(get_catalogue),
    store: SqlCatalogueStore = Depends(get_store),
):
    event = await MetadataHandlers(state, store).set_uri_by_pair(
        caller, edition, item, body.uri,
    )
    return {"event": event.kind.value, **event.to_payload()}
