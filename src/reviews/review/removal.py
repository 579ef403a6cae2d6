"""DeleteReview — remove a review together with its response and reports.

Authors may delete their own review while it is PENDING; administrators may
delete any review. The response row goes first, then the reports filed
against the review, then the review itself, all in the handler's unit of
work.
"""

import structlog
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.queries import fetch_all

from reviews.domain import reviews
from reviews.review.access import policy, requester_of
from reviews.review.report import ReviewReport
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)


@reviews.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        policy.ensure_can_delete(review, requester_of(command))

        review.mark_deleted(deleted_by=command.requester_id)
        repo.add(review)

        report_dao = current_domain.repository_for(ReviewReport)._dao
        reports = fetch_all(report_dao.query.filter(review_id=str(review.id)))
        for report in reports:
            report_dao.delete(report)

        repo._dao.delete(review)

        logger.info(
            "Review deleted",
            review_id=str(review.id),
            deleted_by=str(command.requester_id),
            reports_removed=len(reports),
        )
