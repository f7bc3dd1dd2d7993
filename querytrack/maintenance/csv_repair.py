"""Repair rows written before display dates were quoted.

Those rows carry a date such as `10/14/2025, 3:05:09 PM` unquoted, so the
comma inside it shifts every later column by one.
"""

import re

from querytrack.store.csv_codec import serialize_row
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)

_TIME_PART_RE = re.compile(r"^\s*\d{1,2}:\d{2}(:\d{2})?\s*([AaPp][Mm])?\s*$")


def is_broken(line: str) -> bool:
    parts = line.split(",")
    return len(parts) >= 6 and not parts[1].startswith('"') and bool(_TIME_PART_RE.match(parts[2]))


def repair_line(line: str) -> str | None:
    """Rebuild a broken row with proper quoting; None if it is not a broken row."""
    if not is_broken(line):
        return None
    parts = line.split(",")
    timestamp = parts[0]
    display_date = f"{parts[1]},{parts[2]}"
    model, category, query_summary = parts[3], parts[4], parts[5]
    notes = ",".join(parts[6:])
    return serialize_row([timestamp, display_date, model, category, query_summary, notes])


def repair_document(text: str) -> tuple[str, int]:
    """Repair every broken row; blank lines are dropped. Returns (text, repaired count)."""
    lines = text.split("\n")
    fixed = [lines[0].rstrip("\r")]
    repaired = 0

    for raw in lines[1:]:
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        replacement = repair_line(line)
        if replacement is None:
            fixed.append(line)
        else:
            fixed.append(replacement)
            repaired += 1

    logger.info(f"Repaired {repaired} of {len(fixed) - 1} rows")
    return "\n".join(fixed) + "\n", repaired
