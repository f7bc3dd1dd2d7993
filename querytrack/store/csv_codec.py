"""Comma-separated codec for the query log.

Quoting follows RFC 4180: a field is wrapped in double quotes when it holds a
comma, quote or line break, and embedded quotes are doubled. Documents are
split on physical lines before decoding, so a quoted line break inside a row
still splits that row (such rows usually fall below the field minimum and
are dropped).
"""

from collections.abc import Iterable

from querytrack.core.models import QueryRecord
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)

CSV_HEADER = "timestamp,date,model,category,query_summary"
CSV_HEADER_WITH_NOTES = f"{CSV_HEADER},notes"

# Oldest schema has no notes column
MIN_FIELDS = 5

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def parse_line(line: str) -> list[str]:
    """Decode one CSV line into its field values."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def serialize_field(value: str | None) -> str:
    """Encode one value, quoting only when the content requires it."""
    if value is None:
        return ""
    if any(token in value for token in _NEEDS_QUOTING):
        return '"' + value.replace('"', '""') + '"'
    return value


def serialize_row(values: Iterable[str | None]) -> str:
    return ",".join(serialize_field(v) for v in values)


def has_notes_column(header: str) -> bool:
    return len(parse_line(header.strip())) > MIN_FIELDS


def record_to_row(record: QueryRecord, with_notes: bool = False) -> str:
    """Serialize a record for a file whose header has 5 or 6 columns."""
    values = record.fields()
    return serialize_row(values if with_notes else values[:MIN_FIELDS])


def row_to_record(fields: list[str]) -> QueryRecord | None:
    """Map positional fields onto a record; None when the row is too short."""
    if len(fields) < MIN_FIELDS:
        return None
    return QueryRecord(
        timestamp=fields[0],
        display_date=fields[1],
        model=fields[2],
        category=fields[3],
        query_summary=fields[4],
        notes=fields[5] if len(fields) > MIN_FIELDS else "",
    )


def parse_document(text: str) -> list[QueryRecord]:
    """Decode a whole log file. Line 0 is the header; short rows are dropped."""
    records: list[QueryRecord] = []
    dropped = 0

    for line_no, raw in enumerate(text.split("\n")):
        if line_no == 0:
            continue
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        record = row_to_record(parse_line(line))
        if record is None:
            dropped += 1
            logger.debug(f"Dropping line {line_no + 1}: fewer than {MIN_FIELDS} fields")
            continue
        records.append(record)

    if dropped:
        logger.debug(f"Dropped {dropped} short line(s) while parsing")
    return records


def serialize_document(records: Iterable[QueryRecord], header: str = CSV_HEADER_WITH_NOTES) -> str:
    """Render a complete file: header, one row per record, trailing newline."""
    with_notes = has_notes_column(header)
    lines = [header]
    lines.extend(record_to_row(record, with_notes=with_notes) for record in records)
    return "\n".join(lines) + "\n"
