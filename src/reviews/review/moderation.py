"""ModerateReview — an administrator approves or rejects a review.

Administrators may moderate a review whatever its current status; the
moderator and time of the decision are recorded on the review.
"""

import structlog
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.access import policy, requester_of
from reviews.review.review import Review, ReviewStatus

logger = structlog.get_logger(__name__)

_DECISIONS = (ReviewStatus.APPROVED.value, ReviewStatus.REJECTED.value)


@reviews.command(part_of="Review")
class ModerateReview:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    status = String(required=True, max_length=20)  # "APPROVED" or "REJECTED"


@reviews.command_handler(part_of=Review)
class ModerateReviewHandler:
    @handle(ModerateReview)
    def moderate_review(self, command):
        policy.ensure_can_moderate(requester_of(command))

        if command.status not in _DECISIONS:
            raise ValidationError({"status": ["Status must be APPROVED or REJECTED"]})

        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        previous = review.status
        review.moderate(moderator_id=command.requester_id, status=command.status)
        repo.add(review)

        logger.info(
            "Review moderated",
            review_id=str(review.id),
            from_status=previous,
            to_status=review.status,
            moderator_id=str(command.requester_id),
        )
