"""ReportReview — a member flags a review as abusive.

A reporter may hold at most one pending report per review. The handler
gives the friendly message; the unique ``report_key`` column stops
concurrent duplicates.
"""

from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.report import ReportReason, ReviewReport, pending_report_key
from reviews.review.review import Review


@reviews.command(part_of="ReviewReport")
class ReportReview:
    review_id = Identifier(required=True)
    reporter_id = Identifier(required=True)
    reason = String(required=True, max_length=20)
    details = String(max_length=500)


@reviews.command_handler(part_of=ReviewReport)
class ReportReviewHandler:
    @handle(ReportReview)
    def report_review(self, command):
        review = current_domain.repository_for(Review).get(command.review_id)

        if command.reason not in {r.value for r in ReportReason}:
            raise ValidationError({"reason": [f"Unknown report reason {command.reason}"]})

        repo = current_domain.repository_for(ReviewReport)
        key = pending_report_key(review.id, command.reporter_id)
        if repo._dao.query.filter(report_key=key).all().items:
            raise ValidationError({"report": ["You have already reported this review"]})

        report = ReviewReport.file(
            review_id=str(review.id),
            reporter_id=str(command.reporter_id),
            reason=command.reason,
            details=command.details,
        )
        repo.add(report)
        return str(report.id)
