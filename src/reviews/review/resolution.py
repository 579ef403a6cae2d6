"""ResolveReport — an administrator closes an abuse report.

DISMISSED leaves the review untouched. ACTION_TAKEN also rejects the
reported review, recording the resolving administrator as its moderator.
Both writes happen in this handler's unit of work, so they commit or roll
back together.
"""

import structlog
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.access import policy, requester_of
from reviews.review.report import ReportStatus, ReviewReport
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.command(part_of="ReviewReport")
class ResolveReport:
    report_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    status = String(required=True, max_length=20)  # "DISMISSED" or "ACTION_TAKEN"
    resolution = String(max_length=500)


@reviews.command_handler(part_of=ReviewReport)
class ResolveReportHandler:
    @handle(ResolveReport)
    def resolve_report(self, command):
        policy.ensure_can_resolve_reports(requester_of(command))

        report_repo = current_domain.repository_for(ReviewReport)
        report = report_repo.get(command.report_id)

        report.resolve(
            admin_id=command.requester_id,
            outcome=command.status,
            resolution=command.resolution,
        )
        report_repo.add(report)

        if ReportStatus(report.status) == ReportStatus.ACTION_TAKEN:
            review_repo = current_domain.repository_for(Review)
            review = review_repo.get(report.review_id)
            previous = review.status
            review.reject_for_report(admin_id=command.requester_id, report_id=report.id)
            review_repo.add(review)

            logger.info(
                "Review rejected by report",
                review_id=str(review.id),
                report_id=str(report.id),
                from_status=previous,
            )
