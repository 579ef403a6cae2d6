"""SubmitReview — a member reviews a curator.

Pre-checks run against the local rosters: the target must be a curator,
the author cannot review themselves, and an artisan, when given, must
belong to the target. Duplicate submissions get a friendly message here;
the unique ``review_key`` column rejects the ones that race past it.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.projections.artisan_roster import ArtisanRoster
from reviews.projections.member_roster import MemberRoster
from reviews.review.review import Review, review_key

logger = structlog.get_logger(__name__)


@reviews.command(part_of="Review")
class SubmitReview:
    author_id = Identifier(required=True)
    target_id = Identifier(required=True)
    artisan_id = Identifier()
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = String(max_length=1000)


@reviews.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        author_id = str(command.author_id)
        target_id = str(command.target_id)
        artisan_id = str(command.artisan_id) if command.artisan_id else None

        if author_id == target_id:
            raise ValidationError({"target_id": ["You cannot review yourself"]})

        try:
            target = current_domain.repository_for(MemberRoster).get(target_id)
        except ObjectNotFoundError:
            raise ValidationError({"target_id": ["Reviews can only be left for curators"]})
        if not target.is_curator:
            raise ValidationError({"target_id": ["Reviews can only be left for curators"]})

        if artisan_id:
            artisan = current_domain.repository_for(ArtisanRoster).get(artisan_id)
            if str(artisan.curator_id) != target_id:
                raise ValidationError({"artisan_id": ["Artisan does not belong to this curator"]})

        repo = current_domain.repository_for(Review)
        existing = repo._dao.query.filter(review_key=review_key(author_id, target_id, artisan_id)).all()
        if existing.items:
            raise ValidationError({"review": ["You have already reviewed this curator"]})

        review = Review.submit(
            author_id=author_id,
            target_id=target_id,
            artisan_id=artisan_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(review)

        logger.info("Review submitted", review_id=str(review.id), target_id=target_id, rating=command.rating)
        return str(review.id)
