#!/usr/bin/env python3
"""Reclassify catch-all categories in a CSV query log.

Usage Examples:

    # "general" -> selection / navigation / clarification / conversation / other
    ./scripts/remap_categories.py --csv QueryTrackMCP.csv --source general --output remapped.csv

    # Second pass over "other", rewriting the file in place
    ./scripts/remap_categories.py --csv QueryTrackMCP.csv --source other --in-place
"""

import argparse
import sys
from pathlib import Path

from querytrack.maintenance.categorizer import remap_categories
from querytrack.store.csv_codec import CSV_HEADER, parse_document, serialize_document
from querytrack.utils.logger import setup_logger


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Reclassify query categories")
    parser.add_argument("--csv", type=Path, required=True, help="CSV log to read")
    parser.add_argument("--source", default="general", help="Category to reclassify")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--output", type=Path, help="Where to write the remapped log")
    target.add_argument("--in-place", action="store_true", help="Overwrite the input file")
    args = parser.parse_args()

    setup_logger("remap_categories", level="INFO")

    text = args.csv.read_text(encoding="utf-8")
    records = parse_document(text)
    if not records:
        print("No data to process")
        sys.exit(0)

    remapped, changed = remap_categories(records, args.source)
    for before, after in zip(records, remapped):
        if before.category != after.category:
            print(f'Remapped: "{after.query_summary}" -> {after.category}')

    header = text.split("\n", 1)[0].rstrip("\r") or CSV_HEADER
    output = args.csv if args.in_place else args.output
    output.write_text(serialize_document(remapped, header=header), encoding="utf-8")
    print(f'\nRemapped {changed} entries from "{args.source}" into {output}')


if __name__ == "__main__":
    main()
