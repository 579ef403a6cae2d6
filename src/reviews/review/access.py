"""ReviewAccessPolicy — who may see and change a review.

Ownership and role failures raise ``AccessDenied``; acting on a review in
the wrong status raises ``ValidationError``. Listing and single-review
lookups share the same visibility rule through ``visibility_filter``.
"""

from protean.exceptions import ValidationError
from protean.utils.query import Q
from shared.exceptions import AccessDenied
from shared.requester import Requester, Role

from reviews.review.review import ReviewStatus


def _is(requester, member_id) -> bool:
    return requester.id is not None and member_id is not None and str(requester.id) == str(member_id)


class ReviewAccessPolicy:
    def can_view(self, review, requester) -> bool:
        if ReviewStatus(review.status) == ReviewStatus.APPROVED:
            return True
        if requester.is_admin:
            return True
        return _is(requester, review.author_id) or _is(requester, review.target_id)

    def ensure_can_view(self, review, requester):
        if not self.can_view(review, requester):
            raise AccessDenied("You are not allowed to view this review")

    def ensure_can_update(self, review, requester):
        if not _is(requester, review.author_id):
            raise AccessDenied("Only the author can update this review")
        if not review.is_pending:
            raise ValidationError({"status": ["Only pending reviews can be updated"]})

    def ensure_can_delete(self, review, requester):
        if requester.is_admin:
            return
        if not _is(requester, review.author_id):
            raise AccessDenied("Only the author or an administrator can delete this review")
        if not review.is_pending:
            raise ValidationError({"status": ["Only pending reviews can be deleted by their author"]})

    def ensure_can_moderate(self, requester):
        if not requester.is_admin:
            raise AccessDenied("Only administrators can moderate reviews")

    def ensure_can_respond(self, review, requester):
        if not _is(requester, review.target_id):
            raise AccessDenied("Only the reviewed curator can respond to this review")
        if not review.is_approved:
            raise ValidationError({"status": ["Can only respond to approved reviews"]})
        if review.response is not None:
            raise ValidationError({"response": ["This review already has a response"]})

    def ensure_can_update_response(self, review, requester):
        if not _is(requester, review.target_id):
            raise AccessDenied("Only the reviewed curator can update this response")

    def ensure_can_delete_response(self, review, requester):
        if requester.is_admin:
            return
        if not _is(requester, review.target_id):
            raise AccessDenied("Only the reviewed curator or an administrator can delete this response")

    def ensure_can_view_reports(self, requester):
        if not requester.is_admin:
            raise AccessDenied("Only administrators can view reports")

    def ensure_can_resolve_reports(self, requester):
        if not requester.is_admin:
            raise AccessDenied("Only administrators can resolve reports")

    def visibility_filter(self, requester):
        """Query criteria limiting a listing to what ``requester`` may see.

        Returns None for administrators, who see everything.
        """
        if requester.is_admin:
            return None
        approved = Q(status=ReviewStatus.APPROVED.value)
        if not requester.is_authenticated:
            return approved
        return approved | Q(author_id=requester.id) | Q(target_id=requester.id)


policy = ReviewAccessPolicy()


def requester_of(command) -> Requester:
    """The requester a command was issued on behalf of."""
    return Requester(id=command.requester_id, role=command.requester_role or Role.MEMBER.value)
