"""MemberRoster — local copy of Directory members and their roles.

Maintained from Directory events by ``reviews.review.directory_events``.
Answers "does this member exist" and "is this member a curator" without
reaching into the Directory domain.
"""

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews

CURATOR_ROLE = "CURATOR"


@reviews.projection
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
