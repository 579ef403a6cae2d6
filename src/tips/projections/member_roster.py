"""MemberRoster — the Tips domain's copy of Directory members."""

from protean.fields import DateTime, Identifier, String

from tips.domain import tips

CURATOR_ROLE = "CURATOR"


@tips.projection
class MemberRoster:
    member_id = Identifier(identifier=True, required=True)
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    role = String(required=True, max_length=20)
    registered_at = DateTime()
    updated_at = DateTime()

    @property
    def is_curator(self):
        return self.role == CURATOR_ROLE
