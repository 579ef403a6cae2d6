"""Requester identity supplied by the authentication collaborator.

The gateway in front of this service authenticates callers and forwards
their identity as ``X-User-Id`` and ``X-User-Role`` headers.
"""

from fastapi import Depends, Header

from shared.exceptions import Unauthenticated
from shared.requester import ANONYMOUS, Requester, Role


async def get_requester(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> Requester:
    if not x_user_id:
        return ANONYMOUS
    role = (x_user_role or Role.MEMBER.value).upper()
    if role not in {r.value for r in Role}:
        role = Role.MEMBER.value
    return Requester(id=x_user_id, role=role)


async def require_requester(requester: Requester = Depends(get_requester)) -> Requester:
    if not requester.is_authenticated:
        raise Unauthenticated()
    return requester
