"""Tests for ReportWorkerError."""

from report_worker.core.errors import ErrorKind, ReportWorkerError


class TestReportWorkerError:
    def test_message_is_str(self):
        err = ReportWorkerError("Failed to retrieve the reports: 503", ErrorKind.UPSTREAM_HTTP, 503)
        assert str(err) == "Failed to retrieve the reports: 503"
        assert err.message == str(err)

    def test_status_text(self):
        assert ReportWorkerError("x", ErrorKind.UPSTREAM_HTTP, 500).status_text == "500"

    def test_status_text_none(self):
        assert ReportWorkerError("x", ErrorKind.TRANSPORT).status_text == "<none>"

    def test_kind_values(self):
        assert {k.value for k in ErrorKind} == {"upstream-http", "transport", "config"}
