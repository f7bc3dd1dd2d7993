#!/usr/bin/env python3
"""Append one query to the log.

Usage:
    ./scripts/log_query.py --model Claude --summary "Refactor the CSV parser" \
        --category refactoring --notes "second attempt"

Location and format come from QUERY_LOG_PATH / QUERY_LOG_FORMAT (or --config).
"""

import argparse
import sys
from pathlib import Path

from querytrack.core.config_loader import ConfigLoader
from querytrack.core.errors import QueryTrackError
from querytrack.service import QueryTrackService
from querytrack.utils.logger import set_level


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Log a model query")
    parser.add_argument("--model", required=True, help="Model that was queried")
    parser.add_argument("--summary", required=True, help="Short summary of the query")
    parser.add_argument("--category", help="Optional category")
    parser.add_argument("--notes", help="Optional notes")
    parser.add_argument("--config", type=Path, help="Optional YAML config file")
    args = parser.parse_args()

    config = ConfigLoader.load_yaml(args.config) if args.config else ConfigLoader.from_env()
    set_level(config.log_level)

    service = QueryTrackService(config)
    try:
        print(service.log(args.model, args.summary, category=args.category, notes=args.notes))
    except QueryTrackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
