"""Cross-domain event contracts for Directory domain events.

Reviews and Tips keep local rosters of members and artisans. They consume
these contracts, registered with ``domain.register_external_event()`` under
the same ``__type__`` strings the Directory domain publishes.

The source-of-truth events are in src/directory/member/events.py and
src/directory/artisan/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String


class MemberRegistered(BaseEvent):
    """A member joined the marketplace."""

    __version__ = 1

    member_id = Identifier(required=True)
    first_name = String(required=True)
    last_name = String(required=True)
    role = String(required=True)
    registered_at = DateTime(required=True)


class MemberRoleChanged(BaseEvent):
    """A member's role changed, e.g. a verified curator was promoted."""

    __version__ = 1

    member_id = Identifier(required=True)
    previous_role = String(required=True)
    role = String(required=True)
    changed_at = DateTime(required=True)


class ArtisanRegistered(BaseEvent):
    """A curator registered an artisan they represent."""

    __version__ = 1

    artisan_id = Identifier(required=True)
    curator_id = Identifier(required=True)
    name = String(required=True)
    registered_at = DateTime(required=True)
