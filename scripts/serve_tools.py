#!/usr/bin/env python3
"""Run the log_query / show_dashboard tool server on stdio.

Same as the `querytrack-tools` console script once the package is installed.
"""

from querytrack.tools.server import main

if __name__ == "__main__":
    main()
