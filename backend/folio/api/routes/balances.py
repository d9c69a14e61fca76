"""Balance Routes — read-only ledger queries.

Invariants:
    - Never-credited holdings report 0
    - Batch query arrays must have equal length (LENGTH_MISMATCH otherwise)
"""

from fastapi import APIRouter, Depends

from folio.api.dependencies import get_ledger
from folio.core.domain_types import Address, TokenId
from folio.core.errors import LengthMismatchError
from folio.core.token_codec import check_token_id
from folio.infrastructure.ledger_repository import SqlLedgerRepository
from folio.schemas.catalogue import BalanceBatchRequest

router = APIRouter(prefix="/api/v1/balances", tags=["balances"])


@router.get("/{holder}/{token_id}")
async def balance_of(
    holder: str, token_id: int,
    ledger: SqlLedgerRepository = Depends(get_ledger),
):
    check_token_id(token_id)
    amount = await ledger.balance_of(Address(holder), TokenId(token_id))
    return {"holder": holder, "token_id": str(token_id), "balance": amount}


@router.post("/batch")
async def balance_of_batch(
    body: BalanceBatchRequest,
    ledger: SqlLedgerRepository = Depends(get_ledger),
):
    if len(body.holders) != len(body.token_ids):
        raise LengthMismatchError(len(body.holders), len(body.token_ids))
    for token_id in body.token_ids:
        check_token_id(token_id)
    balances = await ledger.balance_of_batch(
        [Address(h) for h in body.holders],
        [TokenId(t) for t in body.token_ids],
    )
    return {"balances": balances}
