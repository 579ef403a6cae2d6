"""Domain events for the Artisan aggregate."""

from protean.fields import DateTime, Identifier, String

from directory.domain import directory


@directory.event(part_of="Artisan")
class ArtisanRegistered:
    """A curator registered an artisan they represent."""

    __version__ = 1

    artisan_id = Identifier(required=True)
    curator_id = Identifier(required=True)
    name = String(required=True)
    registered_at = DateTime(required=True)
