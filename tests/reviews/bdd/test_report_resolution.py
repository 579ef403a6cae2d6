"""BDD tests for resolving abuse reports."""

from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when
from reviews.review.events import ReviewRejected
from reviews.review.report import ReportStatus, ReviewReport

scenarios("features/report_resolution.feature")


@given("a pending report against the review", target_fixture="report")
def pending_report(review):
    report = ReviewReport.file(review_id=str(review.id), reporter_id="member-002", reason="SPAM")
    report._events.clear()
    return report


@given("the report was dismissed")
def report_dismissed(report):
    report.resolve("admin-001", "DISMISSED")
    report._events.clear()


@when(parsers.cfparse('the administrator "{admin_id}" resolves the report as "{outcome}"'))
def resolve_report(review, report, admin_id, outcome, error):
    try:
        report.resolve(admin_id, outcome)
    except ValidationError as exc:
        error["exc"] = exc
        return
    if ReportStatus(report.status) == ReportStatus.ACTION_TAKEN:
        review.reject_for_report(admin_id, report.id)


@then(parsers.cfparse('the report status is "{status}"'))
def report_status_is(report, status):
    assert report.status == status


@then("the rejection records the report")
def rejection_records_report(review, report):
    event = next(e for e in review._events if isinstance(e, ReviewRejected))
    assert event.report_id == str(report.id)
    assert event.trigger == "REPORT_ACTION_TAKEN"
    assert event.previous_status == "APPROVED"
