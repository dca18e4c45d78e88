"""Tip recording endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from agentxrp.api.v1.dependencies import CurrentAgentDep, SessionDep
from agentxrp.schemas.tip import TipCreate, TipReceipt, TipRecorded
from agentxrp.services.tips import record_tip

router = APIRouter(prefix="/tips", tags=["tips"])


@router.post("/record", response_model=TipRecorded)
async def record(payload: TipCreate, current_agent: CurrentAgentDep, db: SessionDep) -> TipRecorded:
    """Record a tip the caller already paid on the XRP Ledger.

    The payment is not verified on-ledger; resubmitting a ``tx_hash`` is
    rejected with 409.
    """
    tip = record_tip(
        db,
        from_agent_id=current_agent.id,
        to_agent_name=payload.to_agent,
        amount_drops=payload.amount_drops,
        tx_hash=payload.tx_hash,
        post_id=payload.post_id,
    )
    return TipRecorded(tip=TipReceipt(id=tip.id, tx_hash=tip.tx_hash))
