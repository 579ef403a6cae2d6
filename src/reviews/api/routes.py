"""FastAPI routes for the Reviews bounded context.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts). Reads go through
``reviews.review.queries``; every JSON body is wrapped in the standard
envelope.
"""

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain
from shared.api.pagination import Page, get_page
from shared.api.requester import get_requester, require_requester
from shared.api.responses import envelope
from shared.requester import Requester

from reviews.api.schemas import (
    EditReviewRequest,
    ModerateReviewRequest,
    ReportReviewRequest,
    ResolveReportRequest,
    ReviewResponseRequest,
    SubmitReviewRequest,
)
from reviews.review import queries
from reviews.review.editing import EditReview
from reviews.review.moderation import ModerateReview
from reviews.review.removal import DeleteReview
from reviews.review.report import ReviewReport
from reviews.review.reporting import ReportReview
from reviews.review.resolution import ResolveReport
from reviews.review.response import RemoveReviewResponse, RespondToReview, UpdateReviewResponse
from reviews.review.review import Review
from reviews.review.submission import SubmitReview

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------
def _member(members, member_id):
    member = members.get(str(member_id)) if member_id else None
    if member is None:
        return None
    return {"id": str(member.member_id), "first_name": member.first_name, "last_name": member.last_name}


def _artisan(artisans, artisan_id):
    artisan = artisans.get(str(artisan_id)) if artisan_id else None
    if artisan is None:
        return None
    return {"id": str(artisan.artisan_id), "name": artisan.name}


def _response_data(review):
    response = review.response
    if response is None:
        return None
    return {
        "id": str(response.id),
        "review_id": str(review.id),
        "content": response.content,
        "created_at": response.created_at,
        "updated_at": response.updated_at,
    }


def _review_data(review, members, artisans):
    return {
        "id": str(review.id),
        "rating": review.rating,
        "comment": review.comment,
        "status": review.status,
        "author_id": str(review.author_id),
        "target_id": str(review.target_id),
        "artisan_id": str(review.artisan_id) if review.artisan_id else None,
        "moderated_by": str(review.moderated_by) if review.moderated_by else None,
        "moderated_at": review.moderated_at,
        "created_at": review.created_at,
        "updated_at": review.updated_at,
        "author": _member(members, review.author_id),
        "target": _member(members, review.target_id),
        "artisan": _artisan(artisans, review.artisan_id),
        "response": _response_data(review),
    }


def _reviews_data(reviews_):
    members = queries.members_by_id([r.author_id for r in reviews_] + [r.target_id for r in reviews_])
    artisans = queries.artisans_by_id([r.artisan_id for r in reviews_])
    return [_review_data(review, members, artisans) for review in reviews_]


def _review_payload(review_id):
    review = current_domain.repository_for(Review).get(review_id)
    return _reviews_data([review])[0]


def _report_data(report):
    return {
        "id": str(report.id),
        "review_id": str(report.review_id),
        "reporter_id": str(report.reporter_id),
        "reason": report.reason,
        "details": report.details,
        "status": report.status,
        "resolved_by": str(report.resolved_by) if report.resolved_by else None,
        "resolved_at": report.resolved_at,
        "resolution": report.resolution,
        "created_at": report.created_at,
        "updated_at": report.updated_at,
    }


# ---------------------------------------------------------------------------
# Listings and aggregation
# ---------------------------------------------------------------------------
@review_router.get("")
async def list_reviews(
    author_id: str | None = Query(default=None, alias="authorId"),
    target_id: str | None = Query(default=None, alias="targetId"),
    artisan_id: str | None = Query(default=None, alias="artisanId"),
    rating: int | None = Query(default=None, ge=1, le=5),
    status: str | None = None,
    order_by: str | None = Query(default=None, alias="orderBy"),
    order_dir: str | None = Query(default=None, alias="orderDir"),
    page: Page = Depends(get_page),
    requester: Requester = Depends(get_requester),
):
    """Reviews visible to the caller, filtered and paginated."""
    items, total = queries.list_reviews(
        requester,
        page,
        author_id=author_id,
        target_id=target_id,
        artisan_id=artisan_id,
        rating=rating,
        status=status,
        order_by=order_by,
        order_dir=order_dir,
    )
    return envelope(_reviews_data(items), meta=page.meta(total, len(items)))


@review_router.get("/moderation-queue")
async def moderation_queue(
    page: Page = Depends(get_page),
    requester: Requester = Depends(require_requester),
):
    items, total = queries.moderation_queue(requester, page)
    return envelope(_reviews_data(items), meta=page.meta(total, len(items)))


@review_router.get("/reports")
async def list_reports(
    status: str | None = None,
    page: Page = Depends(get_page),
    requester: Requester = Depends(require_requester),
):
    items, total = queries.list_reports(requester, page, status=status)
    return envelope([_report_data(report) for report in items], meta=page.meta(total, len(items)))


@review_router.put("/reports/{report_id}")
async def resolve_report(
    report_id: str,
    body: ResolveReportRequest,
    requester: Requester = Depends(require_requester),
):
    """Dismiss a report, or act on it and reject the review."""
    command = ResolveReport(
        report_id=report_id,
        requester_id=requester.id,
        requester_role=requester.role,
        status=body.status,
        resolution=body.resolution,
    )
    current_domain.process(command, asynchronous=False)
    report = current_domain.repository_for(ReviewReport).get(report_id)
    return envelope(_report_data(report), message="Report resolved")


@review_router.get("/aggregation/{target_id}")
async def rating_aggregation(target_id: str):
    return envelope(queries.target_aggregation(target_id))


@review_router.get("/curators/{curator_id}")
async def curator_reviews(curator_id: str, page: Page = Depends(get_page)):
    items, total, summary = queries.curator_reviews(curator_id, page)
    meta = {
        **page.meta(total, len(items)),
        "averageRating": summary["averageRating"],
        "totalReviews": summary["totalReviews"],
    }
    return envelope(_reviews_data(items), meta=meta)


@review_router.get("/artisans/{artisan_id}")
async def artisan_reviews(artisan_id: str, page: Page = Depends(get_page)):
    items, total, summary = queries.artisan_reviews(artisan_id, page)
    meta = {
        **page.meta(total, len(items)),
        "averageRating": summary["averageRating"],
        "totalReviews": summary["totalReviews"],
    }
    return envelope(_reviews_data(items), meta=meta)


# ---------------------------------------------------------------------------
# Review lifecycle
# ---------------------------------------------------------------------------
@review_router.post("", status_code=201)
async def submit_review(
    body: SubmitReviewRequest,
    requester: Requester = Depends(require_requester),
):
    """Submit a review of a curator. It waits for moderation as PENDING."""
    command = SubmitReview(
        author_id=requester.id,
        target_id=body.target_id,
        artisan_id=body.artisan_id,
        rating=body.rating,
        comment=body.comment,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return envelope(_review_payload(review_id), message="Review submitted", code=201)


@review_router.get("/{review_id}")
async def get_review(review_id: str, requester: Requester = Depends(get_requester)):
    review = queries.get_review(review_id, requester)
    return envelope(_reviews_data([review])[0])


@review_router.put("/{review_id}")
async def edit_review(
    review_id: str,
    body: EditReviewRequest,
    requester: Requester = Depends(require_requester),
):
    command = EditReview(
        review_id=review_id,
        requester_id=requester.id,
        requester_role=requester.role,
        rating=body.rating,
        comment=body.comment,
    )
    current_domain.process(command, asynchronous=False)
    return envelope(_review_payload(review_id), message="Review updated")


@review_router.delete("/{review_id}", status_code=204)
async def delete_review(review_id: str, requester: Requester = Depends(require_requester)):
    command = DeleteReview(review_id=review_id, requester_id=requester.id, requester_role=requester.role)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


@review_router.put("/{review_id}/moderate")
async def moderate_review(
    review_id: str,
    body: ModerateReviewRequest,
    requester: Requester = Depends(require_requester),
):
    command = ModerateReview(
        review_id=review_id,
        requester_id=requester.id,
        requester_role=requester.role,
        status=body.status,
    )
    current_domain.process(command, asynchronous=False)
    return envelope(_review_payload(review_id), message="Review moderated")


# ---------------------------------------------------------------------------
# Curator response
# ---------------------------------------------------------------------------
@review_router.post("/{review_id}/respond", status_code=201)
async def respond_to_review(
    review_id: str,
    body: ReviewResponseRequest,
    requester: Requester = Depends(require_requester),
):
    command = RespondToReview(
        review_id=review_id,
        requester_id=requester.id,
        requester_role=requester.role,
        content=body.content,
    )
    current_domain.process(command, asynchronous=False)
    review = current_domain.repository_for(Review).get(review_id)
    return envelope(_response_data(review), message="Response added", code=201)


@review_router.put("/{review_id}/respond")
async def update_review_response(
    review_id: str,
    body: ReviewResponseRequest,
    requester: Requester = Depends(require_requester),
):
    command = UpdateReviewResponse(
        review_id=review_id,
        requester_id=requester.id,
        requester_role=requester.role,
        content=body.content,
    )
    current_domain.process(command, asynchronous=False)
    review = current_domain.repository_for(Review).get(review_id)
    return envelope(_response_data(review), message="Response updated")


@review_router.delete("/{review_id}/respond", status_code=204)
async def delete_review_response(review_id: str, requester: Requester = Depends(require_requester)):
    command = RemoveReviewResponse(review_id=review_id, requester_id=requester.id, requester_role=requester.role)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Abuse reports
# ---------------------------------------------------------------------------
@review_router.post("/{review_id}/report", status_code=201)
async def report_review(
    review_id: str,
    body: ReportReviewRequest,
    requester: Requester = Depends(require_requester),
):
    command = ReportReview(
        review_id=review_id,
        reporter_id=requester.id,
        reason=body.reason,
        details=body.details,
    )
    report_id = current_domain.process(command, asynchronous=False)
    report = current_domain.repository_for(ReviewReport).get(report_id)
    return envelope(_report_data(report), message="Review reported", code=201)
