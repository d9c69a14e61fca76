"""Token Codec — packs an (edition, item) pair into a single token id and back.

Invariants:
    - encode_token_id is a bijection over 0 <= edition, 0 <= item < ITEM_MULTIPLIER
    - decode_token_id(encode_token_id(e, i)) == (e, i) for every valid pair
    - decode_token_id is total over non-negative ids, minted or not
    - Ids above MAX_TOKEN_ID are rejected, never wrapped
    - No side effects: failures raise before anything else happens

Design Decisions:
    - Python int for the arithmetic: edition has no practical bound below the 256-bit ledger width
    - Overflow checked against MAX_TOKEN_ID rather than a machine word (ADR: ledger ids are uint256)
"""

from folio.core.domain_types import (
    Edition, ItemNumber, TokenId, ITEM_MULTIPLIER, MAX_TOKEN_ID,
)
from folio.core.errors import (
    InvalidItemError, InvalidEditionError,
    InvalidIdentifierError, IdentifierOverflowError,
)


def check_item(item: int) -> None:
    """Raise InvalidItemError unless 0 <= item < ITEM_MULTIPLIER."""
    if item < 0 or item >= ITEM_MULTIPLIER:
        raise InvalidItemError(item)


def check_token_id(token_id: int) -> None:
    """Raise InvalidIdentifierError unless 0 <= token_id <= MAX_TOKEN_ID."""
    if token_id < 0 or token_id > MAX_TOKEN_ID:
        raise InvalidIdentifierError(token_id)


def encode_token_id(edition: int, item: int) -> TokenId:
    """Combine edition and item into the token id ``edition * M + item``."""
    check_item(item)
    if edition < 0:
        raise InvalidEditionError(edition)
    token_id = edition * ITEM_MULTIPLIER + item
    if token_id > MAX_TOKEN_ID:
        raise IdentifierOverflowError(edition, item)
    return TokenId(token_id)


def decode_token_id(token_id: int) -> tuple[Edition, ItemNumber]:
    """Split a token id into (edition, item). Integer division, no rounding."""
    if token_id < 0:
        raise InvalidIdentifierError(token_id)
    edition, item = divmod(token_id, ITEM_MULTIPLIER)
    return Edition(edition), ItemNumber(item)
