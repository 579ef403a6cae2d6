"""SendTip — a member tips another member, a curator or an artisan."""

import structlog
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from tips.domain import tips
from tips.tip.recipients import TipRecipientResolver, TipTarget
from tips.tip.tip import Tip

logger = structlog.get_logger(__name__)


@tips.command(part_of="Tip")
class SendTip:
    sender_id = Identifier(required=True)
    target_type = String(max_length=10, default=TipTarget.MEMBER)
    target_id = Identifier(required=True)
    artisan_id = Identifier()
    amount = Float(required=True)
    currency = String(max_length=10)
    message = String(max_length=500)
    tx_hash = String(max_length=255)


@tips.command_handler(part_of=Tip)
class SendTipHandler:
    @handle(SendTip)
    def send_tip(self, command):
        recipient = TipRecipientResolver().resolve(
            sender_id=command.sender_id,
            target_type=command.target_type,
            target_id=command.target_id,
            artisan_id=command.artisan_id,
        )

        tip = Tip.send(
            sender_id=command.sender_id,
            receiver_id=recipient.receiver_id,
            artisan_id=recipient.artisan_id,
            amount=command.amount,
            currency=command.currency,
            message=command.message,
            tx_hash=command.tx_hash,
        )
        current_domain.repository_for(Tip).add(tip)

        logger.info(
            "Tip sent",
            tip_id=str(tip.id),
            target_type=command.target_type,
            receiver_id=recipient.receiver_id,
            status=tip.status,
        )
        return str(tip.id)
