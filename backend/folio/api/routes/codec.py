"""Codec Routes — public, read-only encode/decode of token ids.

Invariants:
    - No authentication, no state: pure functions over the request parameters
    - Token ids returned as decimal strings
"""

from fastapi import APIRouter, Query

from folio.core.token_codec import decode_token_id, encode_token_id
from folio.schemas.catalogue import TokenIdResponse

router = APIRouter(prefix="/api/v1/codec", tags=["codec"])


@router.get("/encode", response_model=TokenIdResponse)
async def encode(edition: int = Query(...), item: int = Query(...)):
    """Pack (edition, item) into a token id."""
    token_id = encode_token_id(edition, item)
    return TokenIdResponse(token_id=str(token_id), edition=edition, item=item)


@router.get("/decode/{token_id}", response_model=TokenIdResponse)
async def decode(token_id: int):
    """Split a token id into (edition, item). Works for never-minted ids."""
    edition, item = decode_token_id(token_id)
    return TokenIdResponse(token_id=str(token_id), edition=edition, item=item)
