"""Summary statistics over the full query log."""

from collections.abc import Sequence
from datetime import tzinfo

import pandas as pd
from dateutil import tz as dateutil_tz

from querytrack.core.errors import NoDataError
from querytrack.core.models import AggregateReport, BreakdownEntry, DailyCount, QueryRecord
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)


def resolve_zone(zone: str | tzinfo | None) -> tzinfo:
    """Turn a zone name (or None for machine local time) into a tzinfo."""
    if zone is None:
        return dateutil_tz.tzlocal()
    if isinstance(zone, tzinfo):
        return zone
    resolved = dateutil_tz.gettz(zone)
    if resolved is None:
        raise ValueError(f"Unknown timezone: {zone}")
    return resolved


def to_local(value: str, zone: tzinfo) -> pd.Timestamp | None:
    """Parse an ISO-8601 string into naive local wall-clock time.

    Offset-aware values are converted into `zone`; naive values are taken as
    already local. Returns None for anything unparseable.
    """
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert(zone).tz_localize(None)
    return ts


def percent_of(count: int, total: int) -> float:
    return round(100.0 * count / total, 1)


def breakdown(labels: pd.Series, total: int) -> list[BreakdownEntry]:
    """Group by exact label, most frequent first; ties keep first-seen order."""
    labels = labels[labels != ""]
    if labels.empty:
        return []
    counts = labels.groupby(labels, sort=False).size()
    counts = counts.sort_values(ascending=False, kind="stable")
    return [
        BreakdownEntry(label=str(label), count=int(count), percent=percent_of(int(count), total))
        for label, count in counts.items()
    ]


def aggregate(records: Sequence[QueryRecord], zone: str | tzinfo | None = None) -> AggregateReport:
    """Build the dashboard statistics; raises NoDataError for an empty log."""
    if not records:
        raise NoDataError()

    local_zone = resolve_zone(zone)
    rows = []
    for record in records:
        ts = to_local(record.timestamp, local_zone)
        if ts is None:
            logger.warning(f"Skipping record with unparseable timestamp: {record.timestamp!r}")
            continue
        rows.append({"ts": ts, "model": record.model, "category": record.category})

    if not rows:
        raise NoDataError()

    df = pd.DataFrame(rows)
    df["day"] = df["ts"].dt.date
    total = len(df)

    latest_day = df["ts"].max().date()
    today_count = int((df["day"] == latest_day).sum())

    per_day = df.groupby("day", sort=True).size()
    avg_per_day = round(total / len(per_day), 1)

    report = AggregateReport(
        total=total,
        today_count=today_count,
        avg_per_day=avg_per_day,
        category_breakdown=breakdown(df["category"], total),
        model_breakdown=breakdown(df["model"], total),
        daily_series=[DailyCount(day=day, count=int(count)) for day, count in per_day.items()],
    )
    logger.info(
        f"Aggregated {total} records over {len(per_day)} day(s): "
        f"{report.distinct_categories} categories, {len(report.model_breakdown)} models"
    )
    return report
