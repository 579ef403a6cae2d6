"""Tests for Review creation, invariants and the natural review key."""

import pytest
from protean.exceptions import ValidationError
from reviews.review.events import ReviewSubmitted
from reviews.review.review import Review, ReviewStatus, review_key


def _make_review(**overrides):
    defaults = {
        "author_id": "member-001",
        "target_id": "curator-001",
        "rating": 4,
        "comment": "Lovely selection and quick answers.",
    }
    defaults.update(overrides)
    return Review.submit(**defaults)


class TestReviewSubmission:
    def test_new_review_is_pending(self):
        review = _make_review()
        assert review.status == ReviewStatus.PENDING.value
        assert review.moderated_by is None
        assert review.moderated_at is None

    def test_timestamps_are_set(self):
        review = _make_review()
        assert review.created_at is not None
        assert review.updated_at == review.created_at

    def test_raises_review_submitted(self):
        review = _make_review(artisan_id="artisan-001")
        assert len(review._events) == 1
        event = review._events[0]
        assert isinstance(event, ReviewSubmitted)
        assert event.review_id == str(review.id)
        assert event.author_id == "member-001"
        assert event.target_id == "curator-001"
        assert event.artisan_id == "artisan-001"
        assert event.rating == 4

    def test_comment_is_optional(self):
        review = _make_review(comment=None)
        assert review.comment is None

    def test_has_no_response(self):
        review = _make_review()
        assert review.response is None


class TestReviewKey:
    def test_key_without_artisan(self):
        assert review_key("a", "t") == "a:t:-"

    def test_key_with_artisan(self):
        assert review_key("a", "t", "x") == "a:t:x"

    def test_review_carries_its_key(self):
        review = _make_review(artisan_id="artisan-009")
        assert review.review_key == "member-001:curator-001:artisan-009"

    def test_artisan_and_no_artisan_keys_differ(self):
        assert _make_review().review_key != _make_review(artisan_id="artisan-001").review_key


class TestReviewInvariants:
    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError) as exc:
            _make_review(rating=rating)
        assert "rating" in exc.value.messages

    @pytest.mark.parametrize("rating", [1, 3, 5])
    def test_rating_bounds_accepted(self, rating):
        assert _make_review(rating=rating).rating == rating

    def test_self_review_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(author_id="curator-001", target_id="curator-001")
        assert "target_id" in exc.value.messages

    def test_comment_longer_than_1000_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(comment="x" * 1001)
