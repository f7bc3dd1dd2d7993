from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from typing import Any

from querytrack.core.config_loader import QueryTrackConfig
from querytrack.core.errors import ValidationFailure
from querytrack.core.models import QueryRecord
from querytrack.report.aggregator import aggregate, resolve_zone
from querytrack.report.renderer import DashboardWriter
from querytrack.store.record_store import RecordStore
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def display_date(moment: datetime, zone: tzinfo | None = None) -> str:
    """Local wall-clock rendering, e.g. 1/14/2025, 3:05:09 PM."""
    local = moment.astimezone(zone)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {suffix}"


class QueryTrackService:
    """The two tool-facing operations: log a query and render the dashboard."""

    def __init__(
        self,
        config: QueryTrackConfig,
        opener: Callable[[Path], Any] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config
        self.store = RecordStore(config)
        self.writer = DashboardWriter(config, opener=opener)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def log(
        self,
        model: str | None,
        query_summary: str | None,
        category: str | None = None,
        notes: str | None = None,
    ) -> str:
        if not model or not model.strip() or not query_summary or not query_summary.strip():
            raise ValidationFailure("Missing required arguments: model and query_summary")

        now = self.clock()
        record = QueryRecord(
            timestamp=iso_timestamp(now),
            display_date=display_date(now, resolve_zone(self.config.timezone)),
            model=model,
            category=category,
            query_summary=query_summary,
            notes=notes,
        )
        path = self.store.append(record)
        logger.info(f"Logged {model} query ({category or 'uncategorized'})")
        return f"Query logged successfully to {path}"

    def render(self) -> str:
        records = self.store.read_records()
        report = aggregate(records, zone=self.config.timezone)
        path = self.writer.write(report)
        return f"Dashboard generated at: {path}"
