"""Domain events for the Member aggregate."""

from protean.fields import DateTime, Identifier, String

from directory.domain import directory


@directory.event(part_of="Member")
class MemberRegistered:
    """A member joined the marketplace."""

    __version__ = 1

    member_id = Identifier(required=True)
    first_name = String(required=True)
    last_name = String(required=True)
    role = String(required=True)
    registered_at = DateTime(required=True)


@directory.event(part_of="Member")
class MemberRoleChanged:
    """A member's role changed."""

    __version__ = 1

    member_id = Identifier(required=True)
    previous_role = String(required=True)
    role = String(required=True)
    changed_at = DateTime(required=True)
