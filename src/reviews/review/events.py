"""Domain events for the Review and ReviewReport aggregates.

All events are versioned, immutable facts representing state changes.
Events are used for:
- Recording activity in the ActivityLog projection
- Cross-domain communication through the outbox and broker
"""

from protean.fields import DateTime, Identifier, Integer, String

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A member submitted a review of a curator."""

    __version__ = 1

    review_id = Identifier(required=True)
    author_id = Identifier(required=True)
    target_id = Identifier(required=True)
    artisan_id = Identifier()
    rating = Integer(required=True)
    comment = String(max_length=1000)
    submitted_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewEdited:
    """The author changed a pending review."""

    __version__ = 1

    review_id = Identifier(required=True)
    author_id = Identifier(required=True)
    rating = Integer()
    comment = String(max_length=1000)
    edited_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewApproved:
    """An administrator approved the review for publication."""

    __version__ = 1

    review_id = Identifier(required=True)
    target_id = Identifier(required=True)
    artisan_id = Identifier()
    rating = Integer(required=True)
    previous_status = String(required=True)
    moderator_id = Identifier(required=True)
    approved_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewRejected:
    """The review was rejected by moderation or by an actioned report.

    ``previous_status`` keeps the decision this rejection overwrote.
    """

    __version__ = 1

    review_id = Identifier(required=True)
    target_id = Identifier(required=True)
    previous_status = String(required=True)
    moderator_id = Identifier(required=True)
    trigger = String(required=True)  # "MODERATE" or "REPORT_ACTION_TAKEN"
    report_id = Identifier()
    rejected_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewDeleted:
    """The review was deleted by its author or an administrator."""

    __version__ = 1

    review_id = Identifier(required=True)
    author_id = Identifier(required=True)
    target_id = Identifier(required=True)
    status = String(required=True)
    deleted_by = Identifier(required=True)
    deleted_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewResponseAdded:
    """The reviewed curator answered an approved review."""

    __version__ = 1

    review_id = Identifier(required=True)
    response_id = Identifier(required=True)
    curator_id = Identifier(required=True)
    content = String(required=True, max_length=500)
    responded_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewResponseUpdated:
    __version__ = 1

    review_id = Identifier(required=True)
    response_id = Identifier(required=True)
    curator_id = Identifier(required=True)
    content = String(required=True, max_length=500)
    updated_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewResponseRemoved:
    __version__ = 1

    review_id = Identifier(required=True)
    response_id = Identifier(required=True)
    removed_by = Identifier(required=True)
    removed_at = DateTime(required=True)


@reviews.event(part_of="ReviewReport")
class ReviewReported:
    """A member flagged a review as abusive."""

    __version__ = 1

    report_id = Identifier(required=True)
    review_id = Identifier(required=True)
    reporter_id = Identifier(required=True)
    reason = String(required=True)
    details = String(max_length=500)
    reported_at = DateTime(required=True)


@reviews.event(part_of="ReviewReport")
class ReportDismissed:
    """An administrator found no fault with the reported review."""

    __version__ = 1

    report_id = Identifier(required=True)
    review_id = Identifier(required=True)
    resolved_by = Identifier(required=True)
    resolution = String(max_length=500)
    resolved_at = DateTime(required=True)


@reviews.event(part_of="ReviewReport")
class ReportActioned:
    """An administrator upheld the report; the review gets rejected."""

    __version__ = 1

    report_id = Identifier(required=True)
    review_id = Identifier(required=True)
    resolved_by = Identifier(required=True)
    resolution = String(max_length=500)
    resolved_at = DateTime(required=True)
