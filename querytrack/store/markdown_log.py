"""Legacy Markdown layout of the query log.

Each entry is a `## <date>` heading followed by bold-labelled bullet lines and
closed by a horizontal rule. The primary flow only appends to this format; the
reader exists for migrating old logs into CSV.
"""

import re

from querytrack.core.models import QueryRecord

MARKDOWN_HEADER = """# LLM Query Log

This file tracks all queries made to various LLM models.

---
"""

_LABELS = {
    "Model": "model",
    "Category": "category",
    "Query": "query_summary",
    "Notes": "notes",
    "Timestamp": "timestamp",
}
_LABEL_RE = re.compile(r"\*\*(Model|Category|Query|Notes|Timestamp)\*\*:\s*(.*)$")


def format_entry(record: QueryRecord) -> str:
    """Render one record as a Markdown section; empty category/notes lines are omitted."""
    lines = ["", f"## {record.display_date}", "", f"- **Model**: {record.model}"]
    if record.category:
        lines.append(f"- **Category**: {record.category}")
    lines.append(f"- **Query**: {record.query_summary}")
    if record.notes:
        lines.append(f"- **Notes**: {record.notes}")
    lines.append(f"- **Timestamp**: {record.timestamp}")
    lines.extend(["", "---", ""])
    return "\n".join(lines)


def parse_markdown_log(text: str, default_category: str = "") -> list[QueryRecord]:
    """Read entries back from a Markdown log.

    Entries lacking a timestamp, model or query are skipped.
    """
    entries: list[dict[str, str]] = []
    current: dict[str, str] | None = None

    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("## "):
            if current is not None:
                entries.append(current)
            current = {"display_date": line[3:].strip()}
            continue
        if current is None:
            continue
        match = _LABEL_RE.search(line)
        if match:
            current[_LABELS[match.group(1)]] = match.group(2).strip()

    if current is not None:
        entries.append(current)

    records = []
    for entry in entries:
        if not (entry.get("timestamp") and entry.get("model") and entry.get("query_summary")):
            continue
        entry.setdefault("category", default_category)
        records.append(QueryRecord(**entry))
    return records
