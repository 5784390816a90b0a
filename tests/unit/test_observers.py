"""Tests for the directory observer hooks."""

import logging
from datetime import datetime, timezone

from marquee.exceptions import NotFound, StoreFailure
from marquee.schemas import MovieSummary, ShowDetail, TheaterSummary
from marquee.services.observers import LoggingObserver, NullObserver, summarise_result


def make_show(id: int = 3) -> ShowDetail:
    return ShowDetail(
        id=id,
        movie_id=1,
        theater_id=1,
        show_time=datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc),
        price=10.0,
        movie=MovieSummary(id=1, title="Heat", duration=170, genre="Crime"),
        theater=TheaterSummary(id=1, name="Roxy", location="Riverside"),
    )


class TestSummariseResult:
    def test_list_reports_row_count(self):
        assert summarise_result([1, 2, 3]) == "3 rows"

    def test_show_reports_id(self):
        assert summarise_result(make_show(9)) == "show 9"

    def test_other_values_report_type(self):
        assert summarise_result(None) == "NoneType"


class TestLoggingObserver:
    def test_entry_logged_at_debug(self, caplog):
        observer = LoggingObserver()
        with caplog.at_level(logging.DEBUG, logger="marquee.services.observers"):
            observer.on_entry("get_by_id", {"show_id": 3})

        assert "get_by_id called with {'show_id': 3}" in caplog.text
        assert caplog.records[0].levelno == logging.DEBUG

    def test_result_logged_with_summary(self, caplog):
        observer = LoggingObserver()
        with caplog.at_level(logging.INFO, logger="marquee.services.observers"):
            observer.on_result("list_all", [make_show(), make_show()])

        assert "list_all returned 2 rows" in caplog.text

    def test_caller_errors_logged_at_info(self, caplog):
        observer = LoggingObserver()
        with caplog.at_level(logging.INFO, logger="marquee.services.observers"):
            observer.on_error("delete", NotFound("Show not found"))

        assert caplog.records[0].levelno == logging.INFO
        assert "delete rejected: Show not found" in caplog.text

    def test_store_failures_logged_at_error(self, caplog):
        observer = LoggingObserver()
        with caplog.at_level(logging.INFO, logger="marquee.services.observers"):
            observer.on_error("list_all", StoreFailure("connection refused"))

        assert caplog.records[0].levelno == logging.ERROR

    def test_custom_logger(self, caplog):
        observer = LoggingObserver(logging.getLogger("audit"))
        with caplog.at_level(logging.INFO, logger="audit"):
            observer.on_result("create", make_show(5))

        assert caplog.records[0].name == "audit"
        assert "create returned show 5" in caplog.text


def test_null_observer_emits_nothing(caplog):
    observer = NullObserver()
    with caplog.at_level(logging.DEBUG):
        observer.on_entry("list_all", {})
        observer.on_result("list_all", [])
        observer.on_error("list_all", StoreFailure("boom"))

    assert caplog.records == []
