"""EditReview — the author changes a pending review.

Only the author can edit, and only while the review is PENDING; once an
administrator has moderated it the review is immutable to its author.
"""

from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.access import policy, requester_of
from reviews.review.review import Review


@reviews.command(part_of="Review")
class EditReview:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    rating = Integer(min_value=1, max_value=5)
    comment = String(max_length=1000)


@reviews.command_handler(part_of=Review)
class EditReviewHandler:
    @handle(EditReview)
    def edit_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        policy.ensure_can_update(review, requester_of(command))

        kwargs = {}
        if command.rating is not None:
            kwargs["rating"] = command.rating
        if command.comment is not None:
            kwargs["comment"] = command.comment

        review.edit(**kwargs)
        repo.add(review)
