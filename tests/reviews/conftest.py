import os

import pytest


@pytest.fixture(scope="session")
def _reviews_domain(request):
    """Initialize the reviews domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from reviews.domain import reviews

    reviews.init()
    return reviews


@pytest.fixture(scope="session", autouse=True)
def setup_db(_reviews_domain):
    from shared.db import drop_db, setup_db

    setup_db(_reviews_domain)

    yield

    drop_db(_reviews_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_reviews_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _reviews_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Roster seeding — what Directory events would deliver in production
# ---------------------------------------------------------------------------
AUTHOR_ID = "member-001"
OTHER_MEMBER_ID = "member-002"
CURATOR_ID = "curator-001"
OTHER_CURATOR_ID = "curator-002"
ADMIN_ID = "admin-001"
ARTISAN_ID = "artisan-001"
OTHER_ARTISAN_ID = "artisan-002"


@pytest.fixture()
def enroll_member():
    from datetime import UTC, datetime

    from shared.events.directory import MemberRegistered
    from reviews.review.directory_events import MemberEventsHandler

    def _enroll(member_id, role="MEMBER", first_name="Test", last_name="Member"):
        MemberEventsHandler().on_member_registered(
            MemberRegistered(
                member_id=member_id,
                first_name=first_name,
                last_name=last_name,
                role=role,
                registered_at=datetime.now(UTC),
            )
        )

    return _enroll


@pytest.fixture()
def enroll_artisan():
    from datetime import UTC, datetime

    from shared.events.directory import ArtisanRegistered
    from reviews.review.directory_events import ArtisanEventsHandler

    def _enroll(artisan_id, curator_id, name="Test Artisan"):
        ArtisanEventsHandler().on_artisan_registered(
            ArtisanRegistered(
                artisan_id=artisan_id,
                curator_id=curator_id,
                name=name,
                registered_at=datetime.now(UTC),
            )
        )

    return _enroll


@pytest.fixture()
def community(enroll_member, enroll_artisan):
    """Two members, two curators, an admin and one artisan per curator."""
    enroll_member(AUTHOR_ID, first_name="Ada", last_name="Author")
    enroll_member(OTHER_MEMBER_ID, first_name="Otto", last_name="Other")
    enroll_member(CURATOR_ID, role="CURATOR", first_name="Cora", last_name="Curator")
    enroll_member(OTHER_CURATOR_ID, role="CURATOR", first_name="Carl", last_name="Curator")
    enroll_member(ADMIN_ID, role="ADMIN", first_name="Adam", last_name="Admin")
    enroll_artisan(ARTISAN_ID, CURATOR_ID, name="Weaver")
    enroll_artisan(OTHER_ARTISAN_ID, OTHER_CURATOR_ID, name="Potter")


# ---------------------------------------------------------------------------
# Command shortcuts
# ---------------------------------------------------------------------------
@pytest.fixture()
def submit(community):
    """Submit a review through the command handler and return its id."""
    from protean import current_domain

    from reviews.review.submission import SubmitReview

    def _submit(author_id=AUTHOR_ID, target_id=CURATOR_ID, rating=4, comment="Lovely work", artisan_id=None):
        return current_domain.process(
            SubmitReview(
                author_id=author_id,
                target_id=target_id,
                artisan_id=artisan_id,
                rating=rating,
                comment=comment,
            ),
            asynchronous=False,
        )

    return _submit


@pytest.fixture()
def moderate():
    from protean import current_domain

    from reviews.review.moderation import ModerateReview

    def _moderate(review_id, status="APPROVED", admin_id=ADMIN_ID):
        current_domain.process(
            ModerateReview(review_id=review_id, requester_id=admin_id, requester_role="ADMIN", status=status),
            asynchronous=False,
        )

    return _moderate


@pytest.fixture()
def approved_review(submit, moderate):
    review_id = submit()
    moderate(review_id, "APPROVED")
    return review_id
