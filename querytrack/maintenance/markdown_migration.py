from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from querytrack.core.errors import StoreIOError
from querytrack.core.models import QueryRecord
from querytrack.store.markdown_log import parse_markdown_log
from querytrack.store.record_store import RecordStore
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)


def _instant(value: str) -> pd.Timestamp:
    # Naive values compare as UTC
    return pd.to_datetime(value, utc=True, errors="coerce")


def latest_timestamp(records: Sequence[QueryRecord]) -> str | None:
    """Most recent timestamp among records, or None if none parse."""
    latest = None
    latest_value = None
    for record in records:
        ts = _instant(record.timestamp)
        if pd.isna(ts):
            continue
        if latest is None or ts > latest:
            latest, latest_value = ts, record.timestamp
    return latest_value


def select_for_migration(
    entries: Sequence[QueryRecord],
    since: str | None = None,
    day: str | None = None,
) -> list[QueryRecord]:
    """Keep entries strictly newer than `since` and/or stamped on `day` (YYYY-MM-DD)."""
    selected = list(entries)
    if since is not None:
        cutoff = _instant(since)
        if pd.isna(cutoff):
            raise ValueError(f"Invalid cutoff timestamp: {since}")
        selected = [e for e in selected if _instant(e.timestamp) > cutoff]
    if day is not None:
        selected = [e for e in selected if e.timestamp.startswith(day)]
    return selected


def migrate_markdown(
    markdown_path: Path,
    store: RecordStore,
    only_newer: bool = False,
    day: str | None = None,
    default_category: str = "",
) -> list[QueryRecord]:
    """Append entries from a Markdown log to a CSV store; returns what was appended."""
    try:
        text = Path(markdown_path).read_text(encoding="utf-8")
    except OSError as e:
        raise StoreIOError(f"Failed to read Markdown log {markdown_path}: {e}", path=markdown_path) from e

    entries = parse_markdown_log(text, default_category=default_category)
    logger.info(f"Parsed {len(entries)} entries from {markdown_path}")

    since = None
    if only_newer and store.exists():
        since = latest_timestamp(store.read_records())
        logger.info(f"Migrating entries newer than {since}")

    selected = select_for_migration(entries, since=since, day=day)
    # Markdown entries carry notes; a fresh target gets the notes column
    store.create(with_notes=True)
    for entry in selected:
        store.append(entry)

    logger.info(f"Migrated {len(selected)} entries to {store.path}")
    return selected
