"""UpdateTip — confirm or cancel a pending tip."""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from tips.domain import tips
from tips.tip.access import policy, requester_of
from tips.tip.tip import Tip


@tips.command(part_of="Tip")
class UpdateTip:
    tip_id = Identifier(required=True)
    requester_id = Identifier(required=True)
    requester_role = String(max_length=20)
    status = String(max_length=20)
    tx_hash = String(max_length=255)


@tips.command_handler(part_of=Tip)
class UpdateTipHandler:
    @handle(UpdateTip)
    def update_tip(self, command):
        repo = current_domain.repository_for(Tip)
        tip = repo.get(command.tip_id)

        policy.ensure_can_update(tip, requester_of(command))

        tip.update(updated_by=command.requester_id, status=command.status, tx_hash=command.tx_hash)
        repo.add(tip)
