"""FastAPI routes for the Tips bounded context."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain
from shared.api.pagination import Page, get_page
from shared.api.requester import require_requester
from shared.api.responses import envelope
from shared.requester import Requester

from tips.api.schemas import ArtisanTipRequest, CuratorTipRequest, SendTipRequest, UpdateTipRequest
from tips.tip import queries
from tips.tip.recipients import TipTarget
from tips.tip.sending import SendTip
from tips.tip.tip import Tip
from tips.tip.updating import UpdateTip

tip_router = APIRouter(prefix="/tips", tags=["tips"])


def _member(members, member_id):
    member = members.get(str(member_id)) if member_id else None
    if member is None:
        return None
    return {"id": str(member.member_id), "first_name": member.first_name, "last_name": member.last_name}


def _tips_data(tips_):
    members = queries.members_by_id([t.sender_id for t in tips_] + [t.receiver_id for t in tips_])
    artisans = queries.artisans_by_id([t.artisan_id for t in tips_])
    data = []
    for tip in tips_:
        artisan = artisans.get(str(tip.artisan_id)) if tip.artisan_id else None
        data.append(
            {
                "id": str(tip.id),
                "amount": tip.amount,
                "currency": tip.currency,
                "message": tip.message,
                "status": tip.status,
                "sender_id": str(tip.sender_id),
                "receiver_id": str(tip.receiver_id),
                "artisan_id": str(tip.artisan_id) if tip.artisan_id else None,
                "tx_hash": tip.tx_hash,
                "created_at": tip.created_at,
                "updated_at": tip.updated_at,
                "sender": _member(members, tip.sender_id),
                "receiver": _member(members, tip.receiver_id),
                "artisan": {"id": str(artisan.artisan_id), "name": artisan.name} if artisan else None,
            }
        )
    return data


def _send(requester, target_type, target_id, body, artisan_id=None):
    command = SendTip(
        sender_id=requester.id,
        target_type=target_type,
        target_id=target_id,
        artisan_id=artisan_id,
        amount=body.amount,
        currency=body.currency,
        message=body.message,
        tx_hash=body.tx_hash,
    )
    tip_id = current_domain.process(command, asynchronous=False)
    return _tips_data([current_domain.repository_for(Tip).get(tip_id)])[0]


@tip_router.get("")
async def list_tips(
    direction: str | None = Query(default=None, alias="type", pattern="^(sent|received)$"),
    status: str | None = None,
    order_by: str | None = Query(default=None, alias="orderBy"),
    order_dir: str | None = Query(default=None, alias="orderDir"),
    page: Page = Depends(get_page),
    requester: Requester = Depends(require_requester),
):
    items, total = queries.list_tips(
        requester,
        page,
        direction=direction,
        status=status,
        order_by=order_by,
        order_dir=order_dir,
    )
    return envelope(_tips_data(items), meta=page.meta(total, len(items)))


@tip_router.post("", status_code=201)
async def send_tip(body: SendTipRequest, requester: Requester = Depends(require_requester)):
    data = _send(requester, TipTarget.MEMBER, body.receiver_id, body, artisan_id=body.artisan_id)
    return envelope(data, message="Tip created successfully", code=201)


@tip_router.post("/curators/{curator_id}", status_code=201)
async def tip_curator(
    curator_id: str,
    body: CuratorTipRequest,
    requester: Requester = Depends(require_requester),
):
    data = _send(requester, TipTarget.CURATOR, curator_id, body, artisan_id=body.artisan_id)
    return envelope(data, message="Tip sent to curator successfully", code=201)


@tip_router.post("/artisans/{artisan_id}", status_code=201)
async def tip_artisan(
    artisan_id: str,
    body: ArtisanTipRequest,
    requester: Requester = Depends(require_requester),
):
    data = _send(requester, TipTarget.ARTISAN, artisan_id, body)
    return envelope(data, message="Tip sent to artisan successfully", code=201)


@tip_router.get("/{tip_id}")
async def get_tip(tip_id: str, requester: Requester = Depends(require_requester)):
    tip = queries.get_tip(tip_id, requester)
    return envelope(_tips_data([tip])[0])


@tip_router.put("/{tip_id}", status_code=202)
async def update_tip(
    tip_id: str,
    body: UpdateTipRequest,
    requester: Requester = Depends(require_requester),
):
    command = UpdateTip(
        tip_id=tip_id,
        requester_id=requester.id,
        requester_role=requester.role,
        status=body.status,
        tx_hash=body.tx_hash,
    )
    current_domain.process(command, asynchronous=False)
    tip = current_domain.repository_for(Tip).get(tip_id)
    return envelope(_tips_data([tip])[0], message="Tip updated successfully", code=202)
