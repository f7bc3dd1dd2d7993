"""
Tests for the log fix-up tools: classifier, Markdown migration and CSV repair.
"""

import pytest

from querytrack.maintenance.categorizer import categorize_query, recategorize_other, remap_categories
from querytrack.maintenance.csv_repair import repair_document, repair_line
from querytrack.maintenance.markdown_migration import (
    latest_timestamp,
    migrate_markdown,
    select_for_migration,
)
from querytrack.store.csv_codec import CSV_HEADER, CSV_HEADER_WITH_NOTES, parse_document, parse_line
from querytrack.store.markdown_log import MARKDOWN_HEADER, format_entry, parse_markdown_log
from querytrack.store.record_store import RecordStore
from tests.factories import make_record


class TestCategorizer:
    @pytest.mark.parametrize(
        "summary,expected",
        [
            ("yes", "selection"),
            ("Option 2", "selection"),
            ("3", "selection"),
            ("show the config file", "navigation"),
            ("ls", "navigation"),
            ("why is the build slow", "clarification"),
            ("does it handle unicode?", "clarification"),
            ("thanks, looks great", "conversation"),
            ("hi there", "conversation"),
            ("refactor module", "other"),
        ],
    )
    def test_categorize_query(self, summary, expected):
        assert categorize_query(summary) == expected

    @pytest.mark.parametrize(
        "summary,expected",
        [
            ("/init", "navigation"),
            ("Still getting the same error", "debugging"),
            ("fix problems", "debugging"),
            ("redo in typescript", "refactoring"),
            ("should I keep the old file", "clarification"),
            ("lorem ipsum", "other"),
        ],
    )
    def test_recategorize_other(self, summary, expected):
        assert recategorize_other(summary) == expected

    def test_remap_only_touches_source_category(self):
        records = [
            make_record(category="General", query_summary="yes"),
            make_record(category="coding", query_summary="yes"),
            make_record(category="general", query_summary="refactor module"),
        ]

        remapped, changed = remap_categories(records, "general")

        assert [r.category for r in remapped] == ["selection", "coding", "other"]
        assert changed == 2
        assert records[0].category == "General"

    def test_remap_other_counts_only_real_changes(self):
        records = [
            make_record(category="other", query_summary="fix problems"),
            make_record(category="other", query_summary="lorem ipsum"),
        ]

        remapped, changed = remap_categories(records, "other")

        assert [r.category for r in remapped] == ["debugging", "other"]
        assert changed == 1


class TestMarkdownLog:
    def test_entries_read_back(self):
        written = [
            make_record(category="", notes="first"),
            make_record(timestamp="2025-01-02T10:00:00.000Z", display_date="1/2/2025, 10:00:00 AM"),
        ]
        text = MARKDOWN_HEADER + "".join(format_entry(r) for r in written)

        assert parse_markdown_log(text) == written

    def test_incomplete_entries_skipped(self):
        text = MARKDOWN_HEADER + "\n## 1/1/2025\n\n- **Model**: Claude\n- **Query**: no timestamp\n\n---\n"

        assert parse_markdown_log(text) == []

    def test_default_category(self):
        text = MARKDOWN_HEADER + format_entry(make_record(category=""))

        assert parse_markdown_log(text, default_category="general")[0].category == "general"


class TestMigration:
    def test_select_since_and_day(self):
        entries = [
            make_record(timestamp="2025-10-13T10:00:00.000Z"),
            make_record(timestamp="2025-10-14T09:00:00.000Z"),
            make_record(timestamp="2025-10-14T11:00:00.000Z"),
        ]

        assert select_for_migration(entries, since="2025-10-14T09:00:00.000Z") == entries[2:]
        assert select_for_migration(entries, day="2025-10-14") == entries[1:]
        assert select_for_migration(entries) == entries

    def test_invalid_cutoff(self):
        with pytest.raises(ValueError, match="Invalid cutoff"):
            select_for_migration([], since="whenever")

    def test_latest_timestamp_uses_time_not_order(self):
        records = [
            make_record(timestamp="2025-01-05T00:00:00.000Z"),
            make_record(timestamp="2025-01-01T00:00:00.000Z"),
            make_record(timestamp="bogus"),
        ]

        assert latest_timestamp(records) == "2025-01-05T00:00:00.000Z"
        assert latest_timestamp([]) is None

    def test_migrate_only_newer(self, tmp_path, config):
        store = RecordStore(config)
        store.append(make_record(timestamp="2025-01-02T00:00:00.000Z", query_summary="already there"))

        markdown_path = tmp_path / "QueryTrackMCP.md"
        markdown_path.write_text(
            MARKDOWN_HEADER
            + format_entry(make_record(timestamp="2025-01-01T00:00:00.000Z", query_summary="old"))
            + format_entry(make_record(timestamp="2025-01-03T00:00:00.000Z", query_summary="new")),
            encoding="utf-8",
        )

        migrated = migrate_markdown(markdown_path, store, only_newer=True)

        assert [r.query_summary for r in migrated] == ["new"]
        assert [r.query_summary for r in store.read_records()] == ["already there", "new"]

    def test_notes_survive_migration_into_new_log(self, tmp_path, config):
        markdown_path = tmp_path / "QueryTrackMCP.md"
        markdown_path.write_text(
            MARKDOWN_HEADER + format_entry(make_record(category="", notes="important, note")),
            encoding="utf-8",
        )
        store = RecordStore(config)

        migrate_markdown(markdown_path, store)

        assert config.log_path.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER_WITH_NOTES
        assert store.read_records()[0].notes == "important, note"

    def test_existing_five_column_log_keeps_its_header(self, tmp_path, config):
        config.log_path.write_text(CSV_HEADER + "\n", encoding="utf-8")
        markdown_path = tmp_path / "QueryTrackMCP.md"
        markdown_path.write_text(MARKDOWN_HEADER + format_entry(make_record(notes="dropped")), encoding="utf-8")
        store = RecordStore(config)

        migrate_markdown(markdown_path, store)

        assert config.log_path.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER
        assert store.read_records()[0].query_summary == "Write a parser"


class TestCsvRepair:
    def test_repairs_unquoted_date(self):
        line = "2025-10-14T15:05:09.000Z,10/14/2025, 3:05:09 PM,Claude,coding,fix bug,some, notes"

        repaired = repair_line(line)

        assert parse_line(repaired) == [
            "2025-10-14T15:05:09.000Z",
            "10/14/2025, 3:05:09 PM",
            "Claude",
            "coding",
            "fix bug",
            "some, notes",
        ]

    def test_well_formed_rows_untouched(self):
        assert repair_line('2025-10-14T15:05:09.000Z,"10/14/2025, 3:05:09 PM",Claude,coding,ok,') is None
        assert repair_line("2025-10-14T15:05:09.000Z,10/14/2025,Claude,coding,ok,notes") is None

    def test_repair_document(self):
        text = (
            f"{CSV_HEADER},notes\n"
            "2025-10-14T15:05:09.000Z,10/14/2025, 3:05:09 PM,Claude,coding,broken,\n"
            '2025-10-14T16:00:00.000Z,"10/14/2025, 4:00:00 PM",Claude,coding,fine,\n'
            "\n"
        )

        fixed, repaired = repair_document(text)

        assert repaired == 1
        records = parse_document(fixed)
        assert [r.display_date for r in records] == ["10/14/2025, 3:05:09 PM", "10/14/2025, 4:00:00 PM"]
        assert [r.query_summary for r in records] == ["broken", "fine"]
