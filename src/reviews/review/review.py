"""Review aggregate (CQRS) — the core of the Reviews domain.

A member's review of a curator, optionally about one of the curator's
artisans. The aggregate owns the moderation state machine and the single
response the reviewed curator may post.

State Machine (3 states), keyed by trigger:
    MODERATE:             any → APPROVED | REJECTED   (administrator)
    REPORT_ACTION_TAKEN:  any → REJECTED              (actioned report)

Authors can only change or delete their review while it is PENDING.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from reviews.domain import reviews
from reviews.review.events import (
    ReviewApproved,
    ReviewDeleted,
    ReviewEdited,
    ReviewRejected,
    ReviewResponseAdded,
    ReviewResponseRemoved,
    ReviewResponseUpdated,
    ReviewSubmitted,
)

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReviewStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ReviewTrigger(Enum):
    MODERATE = "MODERATE"
    REPORT_ACTION_TAKEN = "REPORT_ACTION_TAKEN"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    ReviewTrigger.MODERATE: {
        ReviewStatus.PENDING: {ReviewStatus.APPROVED, ReviewStatus.REJECTED},
        ReviewStatus.APPROVED: {ReviewStatus.APPROVED, ReviewStatus.REJECTED},
        ReviewStatus.REJECTED: {ReviewStatus.APPROVED, ReviewStatus.REJECTED},
    },
    ReviewTrigger.REPORT_ACTION_TAKEN: {
        ReviewStatus.PENDING: {ReviewStatus.REJECTED},
        ReviewStatus.APPROVED: {ReviewStatus.REJECTED},
        ReviewStatus.REJECTED: {ReviewStatus.REJECTED},
    },
}


def review_key(author_id, target_id, artisan_id=None) -> str:
    """Natural key of a review: one per (author, target, artisan-or-none)."""
    return f"{author_id}:{target_id}:{artisan_id or '-'}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@reviews.entity(part_of="Review")
class ReviewResponse:
    """The reviewed curator's answer to an approved review."""

    curator_id = Identifier(required=True)
    content = String(required=True, max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def content_must_not_be_blank(self):
        if self.content is not None and len(self.content.strip()) == 0:
            raise ValidationError({"content": ["Response content cannot be empty"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A member's rating of a curator, moderated before it is published."""

    author_id = Identifier(required=True)
    target_id = Identifier(required=True)
    artisan_id = Identifier()

    rating = Integer(required=True)
    comment = String(max_length=1000)

    status = String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    moderated_by = Identifier()
    moderated_at = DateTime()

    # Storage-level guard against duplicate submissions
    review_key = String(required=True, max_length=120, unique=True)

    responses = HasMany(ReviewResponse)

    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and (self.rating < 1 or self.rating > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    @invariant.post
    def author_cannot_review_themselves(self):
        if self.author_id is not None and str(self.author_id) == str(self.target_id):
            raise ValidationError({"target_id": ["You cannot review yourself"]})

    @invariant.post
    def at_most_one_response(self):
        if len(self.responses) > 1:
            raise ValidationError({"response": ["A review can have at most one response"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(cls, author_id, target_id, rating, comment=None, artisan_id=None):
        """Submit a new review. Every review starts PENDING."""
        now = datetime.now(UTC)

        review = cls(
            author_id=author_id,
            target_id=target_id,
            artisan_id=artisan_id,
            rating=rating,
            comment=comment,
            status=ReviewStatus.PENDING.value,
            review_key=review_key(author_id, target_id, artisan_id),
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                author_id=str(author_id),
                target_id=str(target_id),
                artisan_id=str(artisan_id) if artisan_id else None,
                rating=rating,
                comment=comment,
                submitted_at=now,
            )
        )

        return review

    @property
    def response(self):
        return self.responses[0] if self.responses else None

    @property
    def is_pending(self):
        return ReviewStatus(self.status) == ReviewStatus.PENDING

    @property
    def is_approved(self):
        return ReviewStatus(self.status) == ReviewStatus.APPROVED

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, trigger, target_status):
        """Validate a transition against the trigger's table."""
        current = ReviewStatus(self.status)
        if target_status not in _VALID_TRANSITIONS[trigger].get(current, set()):
            raise ValidationError(
                {"status": [f"Cannot transition from {current.value} to {target_status.value} via {trigger.value}"]}
            )

    def _record_moderation(self, target_status, moderator_id):
        now = datetime.now(UTC)
        with atomic_change(self):
            self.status = target_status.value
            self.moderated_by = moderator_id
            self.moderated_at = now
            self.updated_at = now
        return now

    # -------------------------------------------------------------------
    # Edit
    # -------------------------------------------------------------------
    def edit(self, rating=_UNSET, comment=_UNSET):
        """Change rating and/or comment. Only allowed while PENDING."""
        if not self.is_pending:
            raise ValidationError({"status": ["Only pending reviews can be updated"]})

        now = datetime.now(UTC)

        with atomic_change(self):
            if rating is not _UNSET and rating is not None:
                self.rating = rating
            if comment is not _UNSET:
                self.comment = comment
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                review_id=str(self.id),
                author_id=str(self.author_id),
                rating=self.rating,
                comment=self.comment,
                edited_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------
    def moderate(self, moderator_id, status):
        """Approve or reject the review, whatever its current status."""
        target = ReviewStatus(status)
        self._assert_can_transition(ReviewTrigger.MODERATE, target)

        previous = self.status
        now = self._record_moderation(target, moderator_id)

        if target == ReviewStatus.APPROVED:
            self.raise_(
                ReviewApproved(
                    review_id=str(self.id),
                    target_id=str(self.target_id),
                    artisan_id=str(self.artisan_id) if self.artisan_id else None,
                    rating=self.rating,
                    previous_status=previous,
                    moderator_id=str(moderator_id),
                    approved_at=now,
                )
            )
        else:
            self.raise_(
                ReviewRejected(
                    review_id=str(self.id),
                    target_id=str(self.target_id),
                    previous_status=previous,
                    moderator_id=str(moderator_id),
                    trigger=ReviewTrigger.MODERATE.value,
                    rejected_at=now,
                )
            )

    def reject_for_report(self, admin_id, report_id):
        """Reject the review because a report against it was actioned.

        Overwrites any earlier moderation decision; the previous status
        travels on the event.
        """
        self._assert_can_transition(ReviewTrigger.REPORT_ACTION_TAKEN, ReviewStatus.REJECTED)

        previous = self.status
        now = self._record_moderation(ReviewStatus.REJECTED, admin_id)

        self.raise_(
            ReviewRejected(
                review_id=str(self.id),
                target_id=str(self.target_id),
                previous_status=previous,
                moderator_id=str(admin_id),
                trigger=ReviewTrigger.REPORT_ACTION_TAKEN.value,
                report_id=str(report_id),
                rejected_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Curator response
    # -------------------------------------------------------------------
    def respond(self, curator_id, content):
        """Post the curator's response. Only once, only on approved reviews."""
        if not self.is_approved:
            raise ValidationError({"status": ["Can only respond to approved reviews"]})

        if self.responses:
            raise ValidationError({"response": ["This review already has a response"]})

        now = datetime.now(UTC)

        response = ReviewResponse(
            curator_id=curator_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self.add_responses(response)
        self.updated_at = now

        self.raise_(
            ReviewResponseAdded(
                review_id=str(self.id),
                response_id=str(response.id),
                curator_id=str(curator_id),
                content=content,
                responded_at=now,
            )
        )
        return response

    def revise_response(self, content):
        response = self.response
        if response is None:
            raise ObjectNotFoundError("No response to update")

        now = datetime.now(UTC)
        response.content = content
        response.updated_at = now
        self.updated_at = now

        self.raise_(
            ReviewResponseUpdated(
                review_id=str(self.id),
                response_id=str(response.id),
                curator_id=str(response.curator_id),
                content=content,
                updated_at=now,
            )
        )

    def withdraw_response(self, removed_by):
        response = self.response
        if response is None:
            raise ObjectNotFoundError("No response to delete")

        now = datetime.now(UTC)
        self.remove_responses(response)
        self.updated_at = now

        self.raise_(
            ReviewResponseRemoved(
                review_id=str(self.id),
                response_id=str(response.id),
                removed_by=str(removed_by),
                removed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------
    def mark_deleted(self, deleted_by):
        """Record the deletion and drop the response ahead of the root row."""
        now = datetime.now(UTC)

        if self.response is not None:
            self.remove_responses(self.response)

        self.raise_(
            ReviewDeleted(
                review_id=str(self.id),
                author_id=str(self.author_id),
                target_id=str(self.target_id),
                status=self.status,
                deleted_by=str(deleted_by),
                deleted_at=now,
            )
        )
