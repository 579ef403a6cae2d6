"""Domain events for the Tip aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from tips.domain import tips


@tips.event(part_of="Tip")
class TipSent:
    """A member sent a tip. It is COMPLETED right away when it carries a tx hash."""

    __version__ = 1

    tip_id = Identifier(required=True)
    sender_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    artisan_id = Identifier()
    amount = Float(required=True)
    currency = String(required=True)
    status = String(required=True)
    tx_hash = String()
    sent_at = DateTime(required=True)


@tips.event(part_of="Tip")
class TipCompleted:
    __version__ = 1

    tip_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    tx_hash = String()
    completed_by = Identifier(required=True)
    completed_at = DateTime(required=True)


@tips.event(part_of="Tip")
class TipCancelled:
    __version__ = 1

    tip_id = Identifier(required=True)
    cancelled_by = Identifier(required=True)
    cancelled_at = DateTime(required=True)
