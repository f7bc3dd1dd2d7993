class QueryTrackError(Exception):
    """Base class for errors surfaced to tool callers."""


class ValidationFailure(QueryTrackError, ValueError):
    """A required input was missing or malformed. Raised before any I/O."""


class StoreIOError(QueryTrackError):
    """The backing log file could not be read or written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class NoDataError(QueryTrackError):
    """Nothing usable to aggregate."""

    def __init__(self, message: str = "No query data available to display"):
        super().__init__(message)


class UnknownToolError(QueryTrackError):
    """A tool call named a tool that is not registered."""
