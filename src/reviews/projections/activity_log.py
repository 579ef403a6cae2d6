"""ActivityLog — one row per review or report mutation, for analytics."""

import json
import uuid

from protean.core.projector import on
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.events import (
    ReportActioned,
    ReportDismissed,
    ReviewApproved,
    ReviewDeleted,
    ReviewEdited,
    ReviewRejected,
    ReviewReported,
    ReviewResponseAdded,
    ReviewResponseRemoved,
    ReviewResponseUpdated,
    ReviewSubmitted,
)
from reviews.review.report import ReviewReport
from reviews.review.review import Review


@reviews.projection
class ActivityLog:
    entry_id = Identifier(identifier=True, required=True)
    event_type = String(required=True, max_length=50)
    review_id = Identifier(required=True)
    actor_id = Identifier()
    details = Text()  # JSON
    occurred_at = DateTime()


def _record(event_type, review_id, actor_id, occurred_at, **details):
    current_domain.repository_for(ActivityLog).add(
        ActivityLog(
            entry_id=str(uuid.uuid4()),
            event_type=event_type,
            review_id=review_id,
            actor_id=actor_id,
            details=json.dumps({k: v for k, v in details.items() if v is not None}),
            occurred_at=occurred_at,
        )
    )


@reviews.projector(projector_for=ActivityLog, aggregates=[Review, ReviewReport])
class ActivityLogProjector:
    @on(ReviewSubmitted)
    def on_review_submitted(self, event):
        _record(
            "REVIEW_SUBMITTED",
            event.review_id,
            event.author_id,
            event.submitted_at,
            target_id=event.target_id,
            artisan_id=event.artisan_id,
            rating=event.rating,
        )

    @on(ReviewEdited)
    def on_review_edited(self, event):
        _record("REVIEW_EDITED", event.review_id, event.author_id, event.edited_at, rating=event.rating)

    @on(ReviewApproved)
    def on_review_approved(self, event):
        _record(
            "REVIEW_APPROVED",
            event.review_id,
            event.moderator_id,
            event.approved_at,
            previous_status=event.previous_status,
        )

    @on(ReviewRejected)
    def on_review_rejected(self, event):
        _record(
            "REVIEW_REJECTED",
            event.review_id,
            event.moderator_id,
            event.rejected_at,
            previous_status=event.previous_status,
            trigger=event.trigger,
            report_id=event.report_id,
        )

    @on(ReviewDeleted)
    def on_review_deleted(self, event):
        _record("REVIEW_DELETED", event.review_id, event.deleted_by, event.deleted_at, status=event.status)

    @on(ReviewResponseAdded)
    def on_response_added(self, event):
        _record("RESPONSE_ADDED", event.review_id, event.curator_id, event.responded_at)

    @on(ReviewResponseUpdated)
    def on_response_updated(self, event):
        _record("RESPONSE_UPDATED", event.review_id, event.curator_id, event.updated_at)

    @on(ReviewResponseRemoved)
    def on_response_removed(self, event):
        _record("RESPONSE_REMOVED", event.review_id, event.removed_by, event.removed_at)

    @on(ReviewReported)
    def on_review_reported(self, event):
        _record(
            "REVIEW_REPORTED",
            event.review_id,
            event.reporter_id,
            event.reported_at,
            report_id=event.report_id,
            reason=event.reason,
        )

    @on(ReportDismissed)
    def on_report_dismissed(self, event):
        _record("REPORT_DISMISSED", event.review_id, event.resolved_by, event.resolved_at, report_id=event.report_id)

    @on(ReportActioned)
    def on_report_actioned(self, event):
        _record("REPORT_ACTIONED", event.review_id, event.resolved_by, event.resolved_at, report_id=event.report_id)
