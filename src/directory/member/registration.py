"""Member registration and role management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from directory.domain import directory
from directory.member.member import Member, MemberRole


@directory.command(part_of="Member")
class RegisterMember:
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    role = String(max_length=20)


@directory.command(part_of="Member")
class ChangeMemberRole:
    member_id = Identifier(required=True)
    role = String(required=True, max_length=20)


@directory.command_handler(part_of=Member)
class MemberCommandHandler:
    @handle(RegisterMember)
    def register_member(self, command):
        repo = current_domain.repository_for(Member)

        email = command.email.strip().lower()
        existing = repo._dao.query.filter(email=email).all()
        if existing.items:
            raise ValidationError({"email": ["A member with this email already exists"]})

        role = command.role or MemberRole.MEMBER.value
        try:
            role = MemberRole(role.upper()).value
        except ValueError:
            raise ValidationError({"role": [f"Unknown role {command.role}"]})

        member = Member.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=email,
            role=role,
        )
        repo.add(member)
        return str(member.id)

    @handle(ChangeMemberRole)
    def change_member_role(self, command):
        repo = current_domain.repository_for(Member)
        member = repo.get(command.member_id)

        try:
            member.change_role(command.role.upper())
        except ValueError:
            raise ValidationError({"role": [f"Unknown role {command.role}"]})

        repo.add(member)
