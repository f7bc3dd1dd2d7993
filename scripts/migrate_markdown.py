#!/usr/bin/env python3
"""Copy entries from a legacy Markdown query log into the CSV log.

Usage Examples:

    # Everything in the Markdown log
    ./scripts/migrate_markdown.py --markdown QueryTrackMCP.md --csv QueryTrackMCP.csv

    # Only entries newer than the last CSV row
    ./scripts/migrate_markdown.py --markdown QueryTrackMCP.md --csv QueryTrackMCP.csv --only-newer

    # Only one day
    ./scripts/migrate_markdown.py --markdown QueryTrackMCP.md --csv QueryTrackMCP.csv --day 2025-10-14
"""

import argparse
from pathlib import Path

from querytrack.core.config_loader import QueryTrackConfig
from querytrack.core.models import LogFormat
from querytrack.maintenance.markdown_migration import migrate_markdown
from querytrack.store.record_store import RecordStore
from querytrack.utils.logger import setup_logger


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Migrate a Markdown query log to CSV")
    parser.add_argument("--markdown", type=Path, required=True, help="Markdown log to read")
    parser.add_argument("--csv", type=Path, required=True, help="CSV log to append to")
    parser.add_argument("--only-newer", action="store_true", help="Skip entries older than the last CSV row")
    parser.add_argument("--day", help="Only migrate entries stamped on this date (YYYY-MM-DD)")
    parser.add_argument("--default-category", default="", help="Category for entries without one")
    args = parser.parse_args()

    setup_logger("migrate_markdown", level="INFO")

    store = RecordStore(QueryTrackConfig(log_format=LogFormat.CSV, log_path=args.csv))
    migrated = migrate_markdown(
        args.markdown,
        store,
        only_newer=args.only_newer,
        day=args.day,
        default_category=args.default_category,
    )

    print(f"Migrated {len(migrated)} entries to {args.csv}")
    for i, entry in enumerate(migrated, 1):
        print(f"  {i}. [{entry.category or 'no category'}] {entry.query_summary[:60]}")


if __name__ == "__main__":
    main()
