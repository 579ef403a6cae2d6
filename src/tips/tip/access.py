"""TipAccessPolicy — tips are private to their sender and receiver."""

from protean.exceptions import ValidationError
from protean.utils.query import Q
from shared.exceptions import AccessDenied
from shared.requester import Requester, Role

from tips.tip.tip import TipStatus


def _is(requester, member_id) -> bool:
    return requester.id is not None and member_id is not None and str(requester.id) == str(member_id)


class TipAccessPolicy:
    def can_view(self, tip, requester) -> bool:
        return requester.is_admin or _is(requester, tip.sender_id) or _is(requester, tip.receiver_id)

    def ensure_can_view(self, tip, requester):
        if not self.can_view(tip, requester):
            raise AccessDenied("You are not allowed to view this tip")

    def ensure_can_update(self, tip, requester):
        if not (requester.is_admin or _is(requester, tip.sender_id)):
            raise AccessDenied("Only the sender or an administrator can update this tip")
        if TipStatus(tip.status) != TipStatus.PENDING:
            raise ValidationError({"status": ["Only pending tips can be updated"]})

    def visibility_filter(self, requester, direction=None):
        """Criteria for the tips ``requester`` may list.

        ``direction`` narrows a member's listing to ``sent`` or ``received``
        tips. Administrators see every tip and get None.
        """
        if requester.is_admin:
            return None
        if direction == "sent":
            return Q(sender_id=requester.id)
        if direction == "received":
            return Q(receiver_id=requester.id)
        return Q(sender_id=requester.id) | Q(receiver_id=requester.id)


policy = TipAccessPolicy()


def requester_of(command) -> Requester:
    return Requester(id=command.requester_id, role=command.requester_role or Role.MEMBER.value)
