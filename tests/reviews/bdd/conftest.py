"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then
from reviews.review.events import (
    ReportActioned,
    ReportDismissed,
    ReviewApproved,
    ReviewEdited,
    ReviewRejected,
    ReviewResponseAdded,
    ReviewResponseRemoved,
    ReviewResponseUpdated,
    ReviewSubmitted,
)
from reviews.review.review import Review

_EVENT_CLASSES = {
    "ReviewSubmitted": ReviewSubmitted,
    "ReviewEdited": ReviewEdited,
    "ReviewApproved": ReviewApproved,
    "ReviewRejected": ReviewRejected,
    "ReviewResponseAdded": ReviewResponseAdded,
    "ReviewResponseUpdated": ReviewResponseUpdated,
    "ReviewResponseRemoved": ReviewResponseRemoved,
    "ReportDismissed": ReportDismissed,
    "ReportActioned": ReportActioned,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("a pending review with rating {rating:d}"), target_fixture="review")
def pending_review(rating):
    review = Review.submit(author_id="member-001", target_id="curator-001", rating=rating, comment="Nice")
    review._events.clear()
    return review


@given("the review is approved")
def review_is_approved(review):
    review.moderate("admin-001", "APPROVED")
    review._events.clear()


@given("the review is rejected")
def review_is_rejected(review):
    review.moderate("admin-001", "REJECTED")
    review._events.clear()


@given(parsers.cfparse('the curator has responded "{content}"'))
def curator_has_responded(review, content):
    review.respond("curator-001", content)
    review._events.clear()


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the action fails because nothing was found")
def action_fails_with_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)


@then(parsers.cfparse('the review status is "{status}"'))
def review_status_is(review, status):
    assert review.status == status


@then(parsers.cfparse("the review rating is {rating:d}"))
def review_rating_is(review, rating):
    assert review.rating == rating


@then(parsers.cfparse('the review was moderated by "{moderator_id}"'))
def review_moderated_by(review, moderator_id):
    assert review.moderated_by == moderator_id


@then(parsers.cfparse("a {event_type} event is raised"))
def generic_event_raised(review, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in review._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in review._events]}"
