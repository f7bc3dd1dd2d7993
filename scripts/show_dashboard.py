#!/usr/bin/env python3
"""Regenerate the HTML analytics dashboard from the CSV query log.

Usage:
    ./scripts/show_dashboard.py              # write and open in the browser
    ./scripts/show_dashboard.py --no-open    # write only
"""

import argparse
import sys
from pathlib import Path

from querytrack.core.config_loader import ConfigLoader
from querytrack.core.errors import QueryTrackError
from querytrack.service import QueryTrackService
from querytrack.utils.logger import set_level
from querytrack.utils.viewer import open_in_viewer


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Render the query analytics dashboard")
    parser.add_argument("--config", type=Path, help="Optional YAML config file")
    parser.add_argument("--no-open", action="store_true", help="Do not open the result in a browser")
    args = parser.parse_args()

    config = ConfigLoader.load_yaml(args.config) if args.config else ConfigLoader.from_env()
    set_level(config.log_level)

    service = QueryTrackService(config, opener=None if args.no_open else open_in_viewer)
    try:
        print(service.render())
    except QueryTrackError as e:
        print(f"Failed to generate dashboard: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
