"""Application tests for ModerateReview."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from reviews.review.moderation import ModerateReview
from reviews.review.review import Review, ReviewStatus
from reviews.review.submission import SubmitReview
from shared.exceptions import AccessDenied


@pytest.fixture()
def review_id(community):
    return current_domain.process(
        SubmitReview(author_id="member-001", target_id="curator-001", rating=4),
        asynchronous=False,
    )


def _moderate(review_id, status, requester_id="admin-001", role="ADMIN"):
    current_domain.process(
        ModerateReview(review_id=review_id, requester_id=requester_id, requester_role=role, status=status),
        asynchronous=False,
    )


class TestModerateReview:
    def test_admin_approves(self, review_id):
        _moderate(review_id, "APPROVED")
        review = current_domain.repository_for(Review).get(review_id)
        assert review.status == ReviewStatus.APPROVED.value
        assert review.moderated_by == "admin-001"
        assert review.moderated_at is not None

    def test_admin_rejects(self, review_id):
        _moderate(review_id, "REJECTED")
        review = current_domain.repository_for(Review).get(review_id)
        assert review.status == ReviewStatus.REJECTED.value

    def test_admin_can_reverse_a_decision(self, review_id):
        _moderate(review_id, "REJECTED")
        _moderate(review_id, "APPROVED", requester_id="admin-002")
        review = current_domain.repository_for(Review).get(review_id)
        assert review.status == ReviewStatus.APPROVED.value
        assert review.moderated_by == "admin-002"

    @pytest.mark.parametrize("role", ["MEMBER", "CURATOR"])
    def test_non_admin_denied(self, review_id, role):
        with pytest.raises(AccessDenied):
            _moderate(review_id, "APPROVED", requester_id="curator-001", role=role)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.status == ReviewStatus.PENDING.value

    @pytest.mark.parametrize("status", ["PENDING", "PUBLISHED"])
    def test_only_approved_or_rejected(self, review_id, status):
        with pytest.raises(ValidationError):
            _moderate(review_id, status)

    def test_unknown_review_not_found(self, community):
        with pytest.raises(ObjectNotFoundError):
            _moderate("review-404", "APPROVED")
