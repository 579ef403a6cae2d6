import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from shared.exceptions import AccessDenied
from tips.projections.activity_log import ActivityLog
from tips.tip.sending import SendTip
from tips.tip.tip import Tip, TipStatus
from tips.tip.updating import UpdateTip


def _send(target_type="MEMBER", target_id="member-002", sender_id="member-001", **extra):
    return current_domain.process(
        SendTip(sender_id=sender_id, target_type=target_type, target_id=target_id, amount=12.5, **extra),
        asynchronous=False,
    )


def _update(tip_id, requester_id="member-001", role="MEMBER", **changes):
    current_domain.process(
        UpdateTip(tip_id=tip_id, requester_id=requester_id, requester_role=role, **changes),
        asynchronous=False,
    )


def _tip(tip_id):
    return current_domain.repository_for(Tip).get(tip_id)


class TestSendTip:
    def test_member_tip(self, community):
        tip = _tip(_send(message="Thanks for the help"))
        assert tip.receiver_id == "member-002"
        assert tip.amount == 12.5
        assert tip.status == TipStatus.PENDING.value

    def test_target_type_defaults_to_member(self, community):
        tip_id = current_domain.process(
            SendTip(sender_id="member-001", target_id="member-002", amount=3.0),
            asynchronous=False,
        )
        assert _tip(tip_id).receiver_id == "member-002"

    def test_artisan_tip_lands_with_curator(self, community):
        tip = _tip(_send(target_type="ARTISAN", target_id="artisan-001"))
        assert tip.receiver_id == "curator-001"
        assert tip.artisan_id == "artisan-001"

    def test_curator_tipping_own_artisan_rejected(self, community):
        with pytest.raises(ValidationError):
            _send(target_type="ARTISAN", target_id="artisan-001", sender_id="curator-001")

    def test_curator_tip_with_tx_hash_completes(self, community):
        tip = _tip(_send(target_type="CURATOR", target_id="curator-002", tx_hash="0xabc"))
        assert tip.status == TipStatus.COMPLETED.value
        assert tip.tx_hash == "0xabc"

    def test_unknown_recipient(self, community):
        with pytest.raises(ObjectNotFoundError):
            _send(target_id="ghost")

    def test_send_is_logged(self, community):
        tip_id = _send(currency="USDC")
        entries = current_domain.repository_for(ActivityLog)._dao.query.filter(tip_id=tip_id).all().items
        assert [e.event_type for e in entries] == ["TIP_SENT"]
        assert json.loads(entries[0].details)["currency"] == "USDC"


class TestUpdateTip:
    def test_sender_confirms_with_tx_hash(self, community):
        tip_id = _send()
        _update(tip_id, tx_hash="0xabc")
        assert _tip(tip_id).status == TipStatus.COMPLETED.value

    def test_admin_cancels(self, community):
        tip_id = _send()
        _update(tip_id, requester_id="admin-001", role="ADMIN", status="CANCELLED")
        assert _tip(tip_id).status == TipStatus.CANCELLED.value

    def test_receiver_cannot_update(self, community):
        tip_id = _send()
        with pytest.raises(AccessDenied):
            _update(tip_id, requester_id="member-002", status="CANCELLED")

    def test_only_pending_tips_update(self, community):
        tip_id = _send(tx_hash="0xabc")
        with pytest.raises(ValidationError):
            _update(tip_id, status="CANCELLED")

    def test_unknown_tip(self, community):
        with pytest.raises(ObjectNotFoundError):
            _update("tip-404", status="CANCELLED")
