"""Pydantic request schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: str | None = Field(default=None, max_length=1000)
    target_id: str
    artisan_id: str | None = None


class EditReviewRequest(BaseModel):
    rating: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = Field(default=None, max_length=1000)


class ModerateReviewRequest(BaseModel):
    status: Literal["APPROVED", "REJECTED"]


class ReviewResponseRequest(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class ReportReviewRequest(BaseModel):
    reason: Literal["SPAM", "INAPPROPRIATE", "FAKE", "HARASSMENT", "OFF_TOPIC", "OTHER"]
    details: str | None = Field(default=None, max_length=500)


class ResolveReportRequest(BaseModel):
    status: Literal["DISMISSED", "ACTION_TAKEN"]
    resolution: str | None = Field(default=None, max_length=500)
