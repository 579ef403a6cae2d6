"""Read side of the Reviews domain — listings, lookups and aggregation.

Every listing that a non-administrator can reach is narrowed by
``ReviewAccessPolicy.visibility_filter`` so that list and show agree on
what a requester may see.
"""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from shared.queries import fetch_all, paginate

from reviews.projections.artisan_roster import ArtisanRoster
from reviews.projections.member_roster import MemberRoster
from reviews.review.access import policy
from reviews.review.rating import aggregate_ratings
from reviews.review.report import ReportStatus, ReviewReport
from reviews.review.review import Review, ReviewStatus

ORDER_FIELDS = {
    "id": "id",
    "rating": "rating",
    "createdAt": "created_at",
}


def _ordering(order_by=None, order_dir=None):
    field = ORDER_FIELDS.get(order_by or "createdAt", "created_at")
    return field if order_dir == "asc" else f"-{field}"


def _reviews():
    return current_domain.repository_for(Review)._dao.query


def list_reviews(
    requester,
    page,
    author_id=None,
    target_id=None,
    artisan_id=None,
    rating=None,
    status=None,
    order_by=None,
    order_dir=None,
):
    """Filtered, ordered page of reviews visible to ``requester``."""
    criteria = {}
    if author_id:
        criteria["author_id"] = author_id
    if target_id:
        criteria["target_id"] = target_id
    if artisan_id:
        criteria["artisan_id"] = artisan_id
    if rating is not None:
        criteria["rating"] = rating
    if status and requester.is_admin:
        criteria["status"] = status

    query = _reviews()
    visibility = policy.visibility_filter(requester)
    if visibility is not None:
        query = query.filter(visibility)
    if criteria:
        query = query.filter(**criteria)

    return paginate(query.order_by(_ordering(order_by, order_dir)), page)


def get_review(review_id, requester):
    review = current_domain.repository_for(Review).get(review_id)
    policy.ensure_can_view(review, requester)
    return review


def moderation_queue(requester, page):
    """Pending reviews, oldest first."""
    policy.ensure_can_moderate(requester)
    query = _reviews().filter(status=ReviewStatus.PENDING.value).order_by("created_at")
    return paginate(query, page)


def list_reports(requester, page, status=None):
    """Abuse reports, oldest first, optionally narrowed to one status."""
    policy.ensure_can_view_reports(requester)
    query = current_domain.repository_for(ReviewReport)._dao.query
    if status:
        if status not in {s.value for s in ReportStatus}:
            raise ValidationError({"status": [f"Unknown report status {status}"]})
        query = query.filter(status=status)
    return paginate(query.order_by("created_at"), page)


def approved_ratings(**criteria):
    reviews = fetch_all(_reviews().filter(status=ReviewStatus.APPROVED.value, **criteria))
    return [review.rating for review in reviews]


def target_aggregation(target_id):
    """Rating summary over a target's approved reviews."""
    current_domain.repository_for(MemberRoster).get(target_id)
    summary = aggregate_ratings(approved_ratings(target_id=target_id))
    return {"targetId": target_id, **summary}


def curator_reviews(curator_id, page):
    """Approved reviews of a curator, newest first, with their rating summary."""
    curator = current_domain.repository_for(MemberRoster).get(curator_id)
    if not curator.is_curator:
        raise ValidationError({"curator_id": ["User is not a curator"]})

    query = _reviews().filter(status=ReviewStatus.APPROVED.value, target_id=curator_id).order_by("-created_at")
    items, total = paginate(query, page)
    return items, total, aggregate_ratings(approved_ratings(target_id=curator_id))


def artisan_reviews(artisan_id, page):
    """Approved reviews about one artisan, newest first, with their rating summary."""
    current_domain.repository_for(ArtisanRoster).get(artisan_id)

    query = _reviews().filter(status=ReviewStatus.APPROVED.value, artisan_id=artisan_id).order_by("-created_at")
    items, total = paginate(query, page)
    return items, total, aggregate_ratings(approved_ratings(artisan_id=artisan_id))


def members_by_id(member_ids):
    """Roster entries for the given ids, keyed by id. Unknown ids are absent."""
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
