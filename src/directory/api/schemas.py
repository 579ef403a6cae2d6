"""Pydantic request schemas for the Directory API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegisterMemberRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254)
    role: str | None = None


class ChangeMemberRoleRequest(BaseModel):
    role: str


class RegisterArtisanRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    curator_id: str
