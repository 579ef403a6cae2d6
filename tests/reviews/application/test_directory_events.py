"""Roster upkeep from Directory events."""

from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from reviews.projections.member_roster import MemberRoster
from reviews.review.directory_events import MemberEventsHandler
from shared.events.directory import MemberRoleChanged


def _change_role(member_id, role):
    MemberEventsHandler().on_member_role_changed(
        MemberRoleChanged(member_id=member_id, previous_role="MEMBER", role=role, changed_at=datetime.now(UTC))
    )


class TestMemberRoster:
    def test_registration_adds_member(self, enroll_member):
        enroll_member("member-100", first_name="Nia", last_name="New")
        member = current_domain.repository_for(MemberRoster).get("member-100")
        assert member.first_name == "Nia"
        assert member.role == "MEMBER"
        assert not member.is_curator

    def test_role_change_promotes_to_curator(self, enroll_member):
        enroll_member("member-100")
        _change_role("member-100", "CURATOR")
        assert current_domain.repository_for(MemberRoster).get("member-100").is_curator

    def test_role_change_for_unknown_member_is_skipped(self, enroll_member):
        _change_role("ghost", "CURATOR")
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(MemberRoster).get("ghost")

    def test_promoted_member_can_be_reviewed(self, enroll_member, submit):
        enroll_member("member-100")
        _change_role("member-100", "CURATOR")
        assert submit(target_id="member-100") is not None
