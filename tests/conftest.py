from pathlib import Path

import pytest

from querytrack.core.config_loader import QueryTrackConfig
from querytrack.core.models import LogFormat


@pytest.fixture
def config(tmp_path: Path) -> QueryTrackConfig:
    return QueryTrackConfig(
        log_format=LogFormat.CSV,
        log_path=tmp_path / "QueryTrackMCP.csv",
        dashboard_path=tmp_path / "query-dashboard.html",
        timezone="UTC",
    )


@pytest.fixture
def markdown_config(tmp_path: Path) -> QueryTrackConfig:
    return QueryTrackConfig(
        log_format=LogFormat.MARKDOWN,
        log_path=tmp_path / "QueryTrackMCP.md",
        dashboard_path=tmp_path / "query-dashboard.html",
        timezone="UTC",
    )
