"""Artisan aggregate — a maker represented on the marketplace by a curator."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from directory.artisan.events import ArtisanRegistered
from directory.domain import directory


@directory.aggregate
class Artisan:
    name = String(required=True, max_length=200)
    curator_id = Identifier(required=True)
    created_at = DateTime()

    @classmethod
    def register(cls, name, curator_id):
        now = datetime.now(UTC)
        artisan = cls(name=name, curator_id=curator_id, created_at=now)
        artisan.raise_(
            ArtisanRegistered(
                artisan_id=str(artisan.id),
                curator_id=str(curator_id),
                name=name,
                registered_at=now,
            )
        )
        return artisan
