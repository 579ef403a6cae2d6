"""Read side of the Tips domain."""

from protean.utils.globals import current_domain
from shared.queries import fetch_all, paginate

from tips.projections.artisan_roster import ArtisanRoster
from tips.projections.member_roster import MemberRoster
from tips.tip.access import policy
from tips.tip.tip import Tip

ORDER_FIELDS = {
    "id": "id",
    "amount": "amount",
    "createdAt": "created_at",
}


def list_tips(requester, page, direction=None, status=None, order_by=None, order_dir=None):
    query = current_domain.repository_for(Tip)._dao.query
    visibility = policy.visibility_filter(requester, direction)
    if visibility is not None:
        query = query.filter(visibility)
    if status:
        query = query.filter(status=status)

    field = ORDER_FIELDS.get(order_by or "createdAt", "created_at")
    return paginate(query.order_by(field if order_dir == "asc" else f"-{field}"), page)


def get_tip(tip_id, requester):
    tip = current_domain.repository_for(Tip).get(tip_id)
    policy.ensure_can_view(tip, requester)
    return tip


def members_by_id(member_ids):
    ids = sorted({str(member_id) for member_id in member_ids if member_id})
    if not ids:
        return {}
    repo = current_domain.repository_for(MemberRoster)
    return {str(m.member_id): m for m in fetch_all(repo._dao.query.filter(member_id__in=ids))}


def artisans_by_id(artisan_ids):
    ids = sorted({str(artisan_id) for artisan_id in artisan_ids if artisan_id})
    if not ids:
        return {}
    repo = current_domain.repository_for(ArtisanRoster)
    return {str(a.artisan_id): a for a in fetch_all(repo._dao.query.filter(artisan_id__in=ids))}
