"""Data fix-up tools for existing query logs."""

from .categorizer import categorize_query, recategorize_other, remap_categories
from .csv_repair import repair_document, repair_line
from .markdown_migration import migrate_markdown, select_for_migration

__all__ = [
    "categorize_query",
    "recategorize_other",
    "remap_categories",
    "repair_document",
    "repair_line",
    "migrate_markdown",
    "select_for_migration",
]
