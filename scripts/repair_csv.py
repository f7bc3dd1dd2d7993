#!/usr/bin/env python3
"""Fix CSV rows whose display date was written without quotes."""

import argparse
from pathlib import Path

from querytrack.maintenance.csv_repair import repair_document
from querytrack.utils.logger import setup_logger


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Repair unquoted display dates in a CSV query log")
    parser.add_argument("--csv", type=Path, required=True, help="CSV log to repair")
    parser.add_argument("--output", type=Path, help="Write here instead of overwriting the input")
    args = parser.parse_args()

    setup_logger("repair_csv", level="INFO")

    fixed, repaired = repair_document(args.csv.read_text(encoding="utf-8"))
    output = args.output or args.csv
    output.write_text(fixed, encoding="utf-8")
    print(f"Fixed {repaired} records in {output}")


if __name__ == "__main__":
    main()
