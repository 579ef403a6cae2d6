"""ArtisanRoster — the Tips domain's copy of Directory artisans."""

from protean.fields import DateTime, Identifier, String

from tips.domain import tips


@tips.projection
class ArtisanRoster:
    artisan_id = Identifier(identifier=True, required=True)
    curator_id = Identifier(required=True)
    name = String(max_length=200)
    registered_at = DateTime()
