from .csv_codec import (
    CSV_HEADER,
    CSV_HEADER_WITH_NOTES,
    parse_document,
    parse_line,
    serialize_document,
    serialize_field,
    serialize_row,
)
from .markdown_log import MARKDOWN_HEADER, format_entry, parse_markdown_log
from .record_store import RecordStore

__all__ = [
    "CSV_HEADER",
    "CSV_HEADER_WITH_NOTES",
    "MARKDOWN_HEADER",
    "RecordStore",
    "format_entry",
    "parse_document",
    "parse_line",
    "parse_markdown_log",
    "serialize_document",
    "serialize_field",
    "serialize_row",
]
