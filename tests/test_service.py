"""
Tests for the log and render operations.
"""

from datetime import datetime, timezone

import pytest

from querytrack.core.errors import NoDataError, StoreIOError, ValidationFailure
from querytrack.service import QueryTrackService, display_date, iso_timestamp
from querytrack.store.csv_codec import CSV_HEADER

FIXED_NOW = datetime(2025, 1, 14, 15, 5, 9, 123456, tzinfo=timezone.utc)


@pytest.fixture
def service(config):
    return QueryTrackService(config, clock=lambda: FIXED_NOW)


class TestTimestamps:
    def test_iso_timestamp_has_millis_and_z(self):
        assert iso_timestamp(FIXED_NOW) == "2025-01-14T15:05:09.123Z"

    def test_display_date_in_zone(self):
        assert display_date(FIXED_NOW, timezone.utc) == "1/14/2025, 3:05:09 PM"
        assert display_date(datetime(2025, 1, 1, 0, 7, 0, tzinfo=timezone.utc), timezone.utc) == (
            "1/1/2025, 12:07:00 AM"
        )


class TestLog:
    def test_logs_record(self, service, config):
        message = service.log("Claude", "Refactor parser", category="refactoring", notes="n")

        assert message == f"Query logged successfully to {config.log_path}"
        records = service.store.read_records()
        assert len(records) == 1
        record = records[0]
        assert record.timestamp == "2025-01-14T15:05:09.123Z"
        assert record.display_date == "1/14/2025, 3:05:09 PM"
        assert record.model == "Claude"
        assert record.category == "refactoring"
        assert record.query_summary == "Refactor parser"

    def test_optional_fields_may_be_omitted(self, service):
        service.log("Gemini", "Summarize a paper")

        assert service.store.read_records()[0].category == ""

    @pytest.mark.parametrize(
        "model,summary",
        [("", "summary"), (None, "summary"), ("Claude", ""), ("Claude", None), ("   ", "summary")],
    )
    def test_missing_required_field_rejected_before_io(self, service, config, model, summary):
        with pytest.raises(ValidationFailure, match="model and query_summary"):
            service.log(model, summary)

        assert not config.log_path.exists()


class TestRender:
    def test_renders_dashboard(self, config):
        opened = []
        service = QueryTrackService(config, opener=opened.append, clock=lambda: FIXED_NOW)
        service.log("Claude", "first", category="coding")
        service.log("Gemini", "second", category="research")

        message = service.render()

        assert message == f"Dashboard generated at: {config.dashboard_path}"
        assert opened == [config.dashboard_path]
        document = config.dashboard_path.read_text(encoding="utf-8")
        assert '<div class="kpi-value" id="kpi-today">2</div>' in document

    def test_header_only_store_has_no_data(self, service, config):
        config.log_path.write_text(CSV_HEADER + "\n", encoding="utf-8")

        with pytest.raises(NoDataError):
            service.render()
        assert not config.dashboard_path.exists()

    def test_missing_store_is_io_failure(self, service):
        with pytest.raises(StoreIOError):
            service.render()
