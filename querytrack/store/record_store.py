from pathlib import Path

from querytrack.core.config_loader import QueryTrackConfig
from querytrack.core.errors import StoreIOError
from querytrack.core.models import LogFormat, QueryRecord
from querytrack.utils.logger import setup_logger

from .csv_codec import CSV_HEADER, CSV_HEADER_WITH_NOTES, has_notes_column, parse_document, record_to_row
from .markdown_log import MARKDOWN_HEADER, format_entry

logger = setup_logger(__name__)


class RecordStore:
    """Append-only query log backed by a single local file.

    The existence check and the header write are not atomic; a single local
    writer is assumed.
    """

    def __init__(self, config: QueryTrackConfig):
        self.path = Path(config.log_path)
        self.log_format = config.log_format

    def exists(self) -> bool:
        return self.path.exists()

    def create(self, with_notes: bool = False) -> bool:
        """Write the header if the file does not exist yet; returns True if it did.

        `with_notes` selects the 6-column CSV header so notes are persisted.
        """
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(self._header(with_notes))
        except OSError as e:
            raise StoreIOError(f"Failed to write to log file {self.path}: {e}", path=self.path) from e
        logger.info(f"Created query log at {self.path}")
        return True

    def append(self, record: QueryRecord) -> Path:
        """Append one record, writing the header first if the file is new."""
        self.create()
        try:
            entry = self._format(record)
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(entry)
        except OSError as e:
            raise StoreIOError(f"Failed to write to log file {self.path}: {e}", path=self.path) from e

        logger.debug(f"Appended {record.model} query to {self.path}")
        return self.path

    def read_records(self) -> list[QueryRecord]:
        """Parse every usable row of the CSV log."""
        if self.log_format is not LogFormat.CSV:
            raise StoreIOError(
                f"Cannot read records from {self.path}: only the CSV log can be aggregated",
                path=self.path,
            )
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreIOError(f"Failed to read CSV file {self.path}: {e}", path=self.path) from e

        records = parse_document(text)
        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records

    def _header(self, with_notes: bool = False) -> str:
        if self.log_format is LogFormat.CSV:
            return (CSV_HEADER_WITH_NOTES if with_notes else CSV_HEADER) + "\n"
        return MARKDOWN_HEADER

    def _format(self, record: QueryRecord) -> str:
        if self.log_format is LogFormat.MARKDOWN:
            return format_entry(record)
        return record_to_row(record, with_notes=self._file_has_notes()) + "\n"

    def _file_has_notes(self) -> bool:
        with open(self.path, encoding="utf-8") as f:
            header = f.readline()
        return has_notes_column(header)
