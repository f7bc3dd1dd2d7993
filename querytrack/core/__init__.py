from .config_loader import ConfigLoader, QueryTrackConfig
from .errors import NoDataError, QueryTrackError, StoreIOError, UnknownToolError, ValidationFailure
from .models import AggregateReport, BreakdownEntry, DailyCount, LogFormat, QueryRecord

__all__ = [
    "ConfigLoader",
    "QueryTrackConfig",
    "QueryTrackError",
    "ValidationFailure",
    "StoreIOError",
    "NoDataError",
    "UnknownToolError",
    "AggregateReport",
    "BreakdownEntry",
    "DailyCount",
    "LogFormat",
    "QueryRecord",
]
