"""Member aggregate — a marketplace user and the role they hold.

Roles:
    MEMBER:  can review curators and send tips
    CURATOR: can be reviewed, answer reviews, receive tips, own artisans
    ADMIN:   moderates reviews and resolves reports
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from directory.domain import directory
from directory.member.events import MemberRegistered, MemberRoleChanged


class MemberRole(Enum):
    MEMBER = "MEMBER"
    CURATOR = "CURATOR"
    ADMIN = "ADMIN"


@directory.aggregate
class Member:
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254, unique=True)
    role = String(choices=MemberRole, default=MemberRole.MEMBER.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_look_like_an_address(self):
        if self.email and "@" not in self.email:
            raise ValidationError({"email": ["Email address is invalid"]})

    @classmethod
    def register(cls, first_name, last_name, email, role=MemberRole.MEMBER.value):
        now = datetime.now(UTC)
        member = cls(
            first_name=first_name,
            last_name=last_name,
            email=email.strip().lower(),
            role=role,
            created_at=now,
            updated_at=now,
        )
        member.raise_(
            MemberRegistered(
                member_id=str(member.id),
                first_name=first_name,
                last_name=last_name,
                role=role,
                registered_at=now,
            )
        )
        return member

    @property
    def is_curator(self):
        return self.role == MemberRole.CURATOR.value

    def change_role(self, role):
        """Move the member to another role. A no-op change is rejected."""
        new_role = MemberRole(role)
        if new_role.value == self.role:
            raise ValidationError({"role": [f"Member already has role {new_role.value}"]})

        now = datetime.now(UTC)
        previous = self.role
        self.role = new_role.value
        self.updated_at = now

        self.raise_(
            MemberRoleChanged(
                member_id=str(self.id),
                previous_role=previous,
                role=new_role.value,
                changed_at=now,
            )
        )
