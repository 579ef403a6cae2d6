"""RegisterArtisan — a curator adds an artisan they represent."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from directory.artisan.artisan import Artisan
from directory.domain import directory
from directory.member.member import Member


@directory.command(part_of="Artisan")
class RegisterArtisan:
    name = String(required=True, max_length=200)
    curator_id = Identifier(required=True)


@directory.command_handler(part_of=Artisan)
class RegisterArtisanHandler:
    @handle(RegisterArtisan)
    def register_artisan(self, command):
        curator = current_domain.repository_for(Member).get(command.curator_id)
        if not curator.is_curator:
            raise ValidationError({"curator_id": ["Artisans can only be registered under a curator"]})

        artisan = Artisan.register(name=command.name, curator_id=command.curator_id)
        current_domain.repository_for(Artisan).add(artisan)
        return str(artisan.id)
