"""Curator responses — answer, revise or withdraw the reply to a review.

Only the reviewed curator may answer, once, and only an approved review.
The curator may revise their answer; the curator or an administrator may
withdraw it.
"""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.access import policy, requester_of
from reviews.review.review import Review


@reviews.command(part_of="Review")
class RespondToReview:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    content = String(required=True, max_length=500)


@reviews.command(part_of="Review")
class UpdateReviewResponse:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    content = String(required=True, max_length=500)


@reviews.command(part_of="Review")
class RemoveReviewResponse:
    review_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)


@reviews.command_handler(part_of=Review)
class ReviewResponseHandler:
    @handle(RespondToReview)
    def respond_to_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        policy.ensure_can_respond(review, requester_of(command))

        response = review.respond(curator_id=command.requester_id, content=command.content)
        repo.add(review)
        return str(response.id)

    @handle(UpdateReviewResponse)
    def update_review_response(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        policy.ensure_can_update_response(review, requester_of(command))

        review.revise_response(command.content)
        repo.add(review)

    @handle(RemoveReviewResponse)
    def remove_review_response(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        requester = requester_of(command)
        if review.response is not None:
            policy.ensure_can_delete_response(review, requester)

        review.withdraw_response(removed_by=requester.id)
        repo.add(review)
