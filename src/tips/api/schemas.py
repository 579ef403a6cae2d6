"""Pydantic request schemas for the Tips API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

CurrencyCode = Literal["XLM", "USDC", "ETH"]


class TipBody(BaseModel):
    amount: float = Field(ge=0.000001)
    currency: CurrencyCode | None = None
    message: str | None = Field(default=None, max_length=500)
    tx_hash: str | None = Field(default=None, max_length=255)


class SendTipRequest(TipBody):
    receiver_id: str
    artisan_id: str | None = None


class CuratorTipRequest(TipBody):
    artisan_id: str | None = None


class ArtisanTipRequest(TipBody):
    pass


class UpdateTipRequest(BaseModel):
    status: Literal["COMPLETED", "CANCELLED"] | None = None
    tx_hash: str | None = Field(default=None, max_length=255)
