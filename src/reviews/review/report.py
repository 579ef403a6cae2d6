"""ReviewReport aggregate — an abuse report filed against a review.

State Machine:
    PENDING → DISMISSED | ACTION_TAKEN   (administrator)

REVIEWED is kept as a recognised status for reports triaged outside this
service; it is never produced here.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews
from reviews.review.events import ReportActioned, ReportDismissed, ReviewReported


class ReportReason(Enum):
    SPAM = "SPAM"
    INAPPROPRIATE = "INAPPROPRIATE"
    FAKE = "FAKE"
    HARASSMENT = "HARASSMENT"
    OFF_TOPIC = "OFF_TOPIC"
    OTHER = "OTHER"


class ReportStatus(Enum):
    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    DISMISSED = "DISMISSED"
    ACTION_TAKEN = "ACTION_TAKEN"


RESOLUTION_OUTCOMES = (ReportStatus.DISMISSED, ReportStatus.ACTION_TAKEN)


def pending_report_key(review_id, reporter_id) -> str:
    """Key held by a pending report; unique per (review, reporter)."""
    return f"{review_id}:{reporter_id}"


@reviews.aggregate
class ReviewReport:
    review_id = Identifier(required=True)
    reporter_id = Identifier(required=True)
    reason = String(required=True, choices=ReportReason)
    details = String(max_length=500)

    status = String(choices=ReportStatus, default=ReportStatus.PENDING.value)
    resolved_by = Identifier()
    resolved_at = DateTime()
    resolution = String(max_length=500)

    # Unique while pending; suffixed with the report id once resolved
    report_key = String(required=True, max_length=160, unique=True)

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def file(cls, review_id, reporter_id, reason, details=None):
        now = datetime.now(UTC)
        report = cls(
            review_id=review_id,
            reporter_id=reporter_id,
            reason=reason,
            details=details,
            status=ReportStatus.PENDING.value,
            report_key=pending_report_key(review_id, reporter_id),
            created_at=now,
            updated_at=now,
        )
        report.raise_(
            ReviewReported(
                report_id=str(report.id),
                review_id=str(review_id),
                reporter_id=str(reporter_id),
                reason=reason,
                details=details,
                reported_at=now,
            )
        )
        return report

    @property
    def is_pending(self):
        return ReportStatus(self.status) == ReportStatus.PENDING

    def resolve(self, admin_id, outcome, resolution=None):
        """Close the report. Only pending reports can be resolved."""
        if outcome not in {s.value for s in RESOLUTION_OUTCOMES}:
            raise ValidationError({"status": ["Reports can only be resolved as DISMISSED or ACTION_TAKEN"]})
        if not self.is_pending:
            raise ValidationError({"status": [f"Report is already {self.status}"]})

        target = ReportStatus(outcome)
        now = datetime.now(UTC)
        self.status = target.value
        self.resolved_by = admin_id
        self.resolved_at = now
        self.resolution = resolution
        self.report_key = f"{self.report_key}:{self.id}"
        self.updated_at = now

        event_cls = ReportActioned if target == ReportStatus.ACTION_TAKEN else ReportDismissed
        self.raise_(
            event_cls(
                report_id=str(self.id),
                review_id=str(self.review_id),
                resolved_by=str(admin_id),
                resolution=resolution,
                resolved_at=now,
            )
        )
