"""Tip aggregate — a payment from one member to another.

State Machine:
    PENDING → COMPLETED | CANCELLED
    COMPLETED, CANCELLED → (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from tips.domain import tips
from tips.tip.events import TipCancelled, TipCompleted, TipSent


class TipStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Currency(Enum):
    XLM = "XLM"
    USDC = "USDC"
    ETH = "ETH"


_VALID_TRANSITIONS = {
    TipStatus.PENDING: {TipStatus.COMPLETED, TipStatus.CANCELLED},
    TipStatus.COMPLETED: set(),
    TipStatus.CANCELLED: set(),
}


@tips.aggregate
class Tip:
    amount = Float(required=True)
    currency = String(choices=Currency, default=Currency.XLM.value)
    message = String(max_length=500)
    status = String(choices=TipStatus, default=TipStatus.PENDING.value)

    sender_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    artisan_id = Identifier()

    tx_hash = String(max_length=255)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def amount_must_be_positive(self):
        if self.amount is not None and self.amount <= 0:
            raise ValidationError({"amount": ["Tip amount must be greater than zero"]})

    @invariant.post
    def cannot_tip_yourself(self):
        if self.sender_id is not None and str(self.sender_id) == str(self.receiver_id):
            raise ValidationError({"receiver_id": ["Cannot send a tip to yourself"]})

    @classmethod
    def send(cls, sender_id, receiver_id, amount, currency=None, message=None, artisan_id=None, tx_hash=None):
        """Create a tip. A tip that already carries a tx hash is settled."""
        now = datetime.now(UTC)
        status = TipStatus.COMPLETED if tx_hash else TipStatus.PENDING

        tip = cls(
            sender_id=sender_id,
            receiver_id=receiver_id,
            artisan_id=artisan_id,
            amount=amount,
            currency=currency or Currency.XLM.value,
            message=message,
            status=status.value,
            tx_hash=tx_hash,
            created_at=now,
            updated_at=now,
        )
        tip.raise_(
            TipSent(
                tip_id=str(tip.id),
                sender_id=str(sender_id),
                receiver_id=str(receiver_id),
                artisan_id=str(artisan_id) if artisan_id else None,
                amount=amount,
                currency=tip.currency,
                status=tip.status,
                tx_hash=tx_hash,
                sent_at=now,
            )
        )
        return tip

    def _assert_can_transition(self, target_status):
        current = TipStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def complete(self, completed_by, tx_hash=None):
        self._assert_can_transition(TipStatus.COMPLETED)

        now = datetime.now(UTC)
        self.status = TipStatus.COMPLETED.value
        if tx_hash:
            self.tx_hash = tx_hash
        self.updated_at = now

        self.raise_(
            TipCompleted(
                tip_id=str(self.id),
                receiver_id=str(self.receiver_id),
                tx_hash=self.tx_hash,
                completed_by=str(completed_by),
                completed_at=now,
            )
        )

    def cancel(self, cancelled_by):
        self._assert_can_transition(TipStatus.CANCELLED)

        now = datetime.now(UTC)
        self.status = TipStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(
            TipCancelled(
                tip_id=str(self.id),
                cancelled_by=str(cancelled_by),
                cancelled_at=now,
            )
        )

    def update(self, updated_by, status=None, tx_hash=None):
        """Apply a sender/admin update. A tx hash always completes the tip."""
        if TipStatus(self.status) != TipStatus.PENDING:
            raise ValidationError({"status": ["Only pending tips can be updated"]})

        if tx_hash or status == TipStatus.COMPLETED.value:
            self.complete(completed_by=updated_by, tx_hash=tx_hash)
        elif status == TipStatus.CANCELLED.value:
            self.cancel(cancelled_by=updated_by)
        elif status is not None:
            raise ValidationError({"status": ["Status must be COMPLETED or CANCELLED"]})
