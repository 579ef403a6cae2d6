"""TipRecipientResolver — who a tip lands with.

A tip is addressed to a member, to a curator, or to an artisan. Artisans
hold no wallet of their own, so a tip for an artisan is received by the
curator who represents them and remembers the artisan it was meant for.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from tips.projections.artisan_roster import ArtisanRoster
from tips.projections.member_roster import MemberRoster


class TipTarget:
    MEMBER = "MEMBER"
    CURATOR = "CURATOR"
    ARTISAN = "ARTISAN"


@dataclass(frozen=True)
class Recipient:
    receiver_id: str
    artisan_id: str | None = None


class TipRecipientResolver:
    def resolve(self, sender_id, target_type, target_id, artisan_id=None) -> Recipient:
        if target_type == TipTarget.MEMBER:
            recipient = self.for_member(target_id, artisan_id)
        elif target_type == TipTarget.CURATOR:
            recipient = self.for_curator(target_id, artisan_id)
        elif target_type == TipTarget.ARTISAN:
            recipient = self.for_artisan(target_id)
        else:
            raise ValidationError({"target_type": [f"Unknown tip target {target_type}"]})

        if str(recipient.receiver_id) == str(sender_id):
            raise ValidationError({"receiver_id": ["Cannot send a tip to yourself"]})
        return recipient

    def for_member(self, member_id, artisan_id=None) -> Recipient:
        member = self._member(member_id, "Recipient not found")
        if artisan_id:
            self._artisan(artisan_id)
        return Recipient(receiver_id=str(member.member_id), artisan_id=str(artisan_id) if artisan_id else None)

    def for_curator(self, curator_id, artisan_id=None) -> Recipient:
        curator = self._member(curator_id, "Curator not found")
        if not curator.is_curator:
            raise ObjectNotFoundError("Curator not found")
        if artisan_id:
            artisan = self._artisan(artisan_id)
            if str(artisan.curator_id) != str(curator.member_id):
                raise ObjectNotFoundError("Artisan not found for this curator")
        return Recipient(receiver_id=str(curator.member_id), artisan_id=str(artisan_id) if artisan_id else None)

    def for_artisan(self, artisan_id) -> Recipient:
        artisan = self._artisan(artisan_id)
        return Recipient(receiver_id=str(artisan.curator_id), artisan_id=str(artisan.artisan_id))

    def _member(self, member_id, message):
        try:
            return current_domain.repository_for(MemberRoster).get(str(member_id))
        except ObjectNotFoundError:
            raise ObjectNotFoundError(message)

    def _artisan(self, artisan_id):
        try:
            return current_domain.repository_for(ArtisanRoster).get(str(artisan_id))
        except ObjectNotFoundError:
            raise ObjectNotFoundError("Artisan not found")
