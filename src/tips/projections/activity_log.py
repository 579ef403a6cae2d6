"""ActivityLog — tip activity for analytics."""

import json
import uuid

from protean.core.projector import on
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from tips.domain import tips
from tips.tip.events import TipCancelled, TipCompleted, TipSent
from tips.tip.tip import Tip


@tips.projection
class ActivityLog:
    entry_id = Identifier(identifier=True, required=True)
    event_type = String(required=True, max_length=50)
    tip_id = Identifier(required=True)
    actor_id = Identifier()
    details = Text()  # JSON
    occurred_at = DateTime()


@tips.projector(projector_for=ActivityLog, aggregates=[Tip])
class ActivityLogProjector:
    def _record(self, event_type, tip_id, actor_id, occurred_at, details):
        current_domain.repository_for(ActivityLog).add(
            ActivityLog(
                entry_id=str(uuid.uuid4()),
                event_type=event_type,
                tip_id=tip_id,
                actor_id=actor_id,
                details=json.dumps(details),
                occurred_at=occurred_at,
            )
        )

    @on(TipSent)
    def on_tip_sent(self, event):
        self._record(
            "TIP_SENT",
            event.tip_id,
            event.sender_id,
            event.sent_at,
            {
                "amount": event.amount,
                "currency": event.currency,
                "receiver_id": event.receiver_id,
                "artisan_id": event.artisan_id,
                "status": event.status,
            },
        )

    @on(TipCompleted)
    def on_tip_completed(self, event):
        self._record("TIP_COMPLETED", event.tip_id, event.completed_by, event.completed_at, {"tx_hash": event.tx_hash})

    @on(TipCancelled)
    def on_tip_cancelled(self, event):
        self._record("TIP_CANCELLED", event.tip_id, event.cancelled_by, event.cancelled_at, {})
