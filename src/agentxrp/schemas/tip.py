"""Tip-related Pydantic schemas."""

from pydantic import BaseModel, Field


class TipCreate(BaseModel):
    """Schema for recording a tip that was paid on the XRP Ledger."""

    tx_hash: str = Field(..., min_length=1, description="Ledger transaction hash of the payment")
    to_agent: str = Field(..., min_length=1, description="Name of the receiving agent")
    amount_drops: int = Field(0, ge=0, description="Amount in drops (1 XRP = 1,000,000 drops)")
    post_id: str | None = Field(None, description="Post the tip is attributed to")


class TipReceipt(BaseModel):
    """Identifiers of a recorded tip."""

    id: str
    tx_hash: str


class TipRecorded(BaseModel):
    """Response body for a successfully recorded tip."""

    success: bool = True
    tip: TipReceipt
