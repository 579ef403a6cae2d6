"""ArtisanRoster — local copy of Directory artisans and their curators."""

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews


@reviews.projection
class ArtisanRoster:
    artisan_id = Identifier(identifier=True, required=True)
    curator_id = Identifier(required=True)
    name = String(max_length=200)
    registered_at = DateTime()
