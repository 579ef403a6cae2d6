"""The ActivityLog projection records review and report mutations."""

import json

from protean import current_domain
from reviews.projections.activity_log import ActivityLog
from reviews.review.reporting import ReportReview
from reviews.review.resolution import ResolveReport


def _entries(review_id):
    return current_domain.repository_for(ActivityLog)._dao.query.filter(review_id=review_id).all().items


def _types(review_id):
    return sorted(entry.event_type for entry in _entries(review_id))


class TestActivityLog:
    def test_submission_logged(self, submit):
        review_id = submit(rating=5)
        entries = _entries(review_id)
        assert [e.event_type for e in entries] == ["REVIEW_SUBMITTED"]
        assert entries[0].actor_id == "member-001"
        assert json.loads(entries[0].details)["rating"] == 5

    def test_moderation_logged(self, approved_review):
        assert _types(approved_review) == ["REVIEW_APPROVED", "REVIEW_SUBMITTED"]

    def test_actioned_report_logged_with_rejection(self, approved_review):
        report_id = current_domain.process(
            ReportReview(review_id=approved_review, reporter_id="member-002", reason="FAKE"),
            asynchronous=False,
        )
        current_domain.process(
            ResolveReport(
                report_id=report_id,
                requester_id="admin-001",
                requester_role="ADMIN",
                status="ACTION_TAKEN",
            ),
            asynchronous=False,
        )
        assert _types(approved_review) == [
            "REPORT_ACTIONED",
            "REVIEW_APPROVED",
            "REVIEW_REJECTED",
            "REVIEW_REPORTED",
            "REVIEW_SUBMITTED",
        ]
