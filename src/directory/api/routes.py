"""FastAPI endpoints for the Directory domain."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain
from shared.api.requester import require_requester
from shared.api.responses import envelope
from shared.exceptions import AccessDenied
from shared.requester import Requester

from directory.api.schemas import (
    ChangeMemberRoleRequest,
    RegisterArtisanRequest,
    RegisterMemberRequest,
)
from directory.artisan.registration import RegisterArtisan
from directory.member.member import Member
from directory.member.registration import ChangeMemberRole, RegisterMember

member_router = APIRouter(prefix="/members", tags=["members"])
artisan_router = APIRouter(prefix="/artisans", tags=["artisans"])


def _member_data(member) -> dict:
    return {
        "id": str(member.id),
        "first_name": member.first_name,
        "last_name": member.last_name,
        "email": member.email,
        "role": member.role,
        "created_at": member.created_at,
    }


@member_router.post("", status_code=201)
async def register_member(body: RegisterMemberRequest):
    command = RegisterMember(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        role=body.role,
    )
    member_id = current_domain.process(command, asynchronous=False)
    return envelope({"member_id": member_id}, message="Member registered", code=201)


@member_router.get("/{member_id}")
async def get_member(member_id: str):
    member = current_domain.repository_for(Member).get(member_id)
    return envelope(_member_data(member), message="Member retrieved")


@member_router.put("/{member_id}/role")
async def change_member_role(
    member_id: str,
    body: ChangeMemberRoleRequest,
    requester: Requester = Depends(require_requester),
):
    if not requester.is_admin:
        raise AccessDenied("Admin access required")
    current_domain.process(ChangeMemberRole(member_id=member_id, role=body.role), asynchronous=False)
    member = current_domain.repository_for(Member).get(member_id)
    return envelope(_member_data(member), message="Member role updated")


@artisan_router.post("", status_code=201)
async def register_artisan(body: RegisterArtisanRequest):
    command = RegisterArtisan(name=body.name, curator_id=body.curator_id)
    artisan_id = current_domain.process(command, asynchronous=False)
    return envelope({"artisan_id": artisan_id}, message="Artisan registered", code=201)
