import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dateutil import tz as dateutil_tz
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from querytrack.utils.logger import setup_logger

from .models import LogFormat

logger = setup_logger(__name__)

DEFAULT_LOG_BASENAME = "QueryTrackMCP"
DEFAULT_DASHBOARD_FILENAME = "query-dashboard.html"

# Environment variable -> config field
ENV_KEYS = {
    "QUERY_LOG_FORMAT": "log_format",
    "QUERY_LOG_PATH": "log_path",
    "QUERY_DASHBOARD_PATH": "dashboard_path",
    "QUERY_DASHBOARD_TITLE": "dashboard_title",
    "QUERY_DASHBOARD_SUBTITLE": "dashboard_subtitle",
    "QUERY_TIMEZONE": "timezone",
    "QUERY_LOG_LEVEL": "log_level",
}


class QueryTrackConfig(BaseModel):
    """Settings resolved once at startup and passed explicitly to each component."""

    model_config = ConfigDict(frozen=True)

    log_format: LogFormat = Field(default=LogFormat.CSV, description="Backing file format")
    log_path: Path = Field(
        ..., description="Query log location; defaults to QueryTrackMCP.<ext> in the working directory"
    )
    dashboard_path: Path = Field(
        default_factory=lambda: Path.cwd() / DEFAULT_DASHBOARD_FILENAME,
        description="Where the rendered dashboard is written",
    )
    dashboard_title: str = Field(default="Query Analytics Dashboard")
    dashboard_subtitle: str = Field(default="")
    timezone: str | None = Field(
        None, description="IANA zone used for day-bucketing; machine local time when unset"
    )
    log_level: str = Field(default="INFO")

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, v: str | None) -> str | None:
        if v is not None and dateutil_tz.gettz(v) is None:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @model_validator(mode="before")
    @classmethod
    def default_log_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("log_path"):
            log_format = LogFormat(data.get("log_format", LogFormat.CSV))
            data = {**data, "log_path": Path.cwd() / f"{DEFAULT_LOG_BASENAME}{log_format.extension}"}
        return data


class ConfigLoader:
    """Build a QueryTrackConfig from the environment and optional YAML file."""

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None, dotenv: bool = True) -> QueryTrackConfig:
        """Resolve settings from environment variables (after loading .env)."""
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ
        data = ConfigLoader._env_overrides(environ)
        return QueryTrackConfig(**data)

    @staticmethod
    def load_yaml(path: str | Path, environ: Mapping[str, str] | None = None) -> QueryTrackConfig:
        """Load settings from YAML; environment variables take precedence."""
        file_path = Path(path).resolve()

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected YAML dict, got {type(data)}")

        unknown = set(data) - set(QueryTrackConfig.model_fields)
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {file_path}: {sorted(unknown)}")
            data = {k: v for k, v in data.items() if k not in unknown}

        if environ is None:
            load_dotenv()
            environ = os.environ
        data.update(ConfigLoader._env_overrides(environ))
        return QueryTrackConfig(**data)

    @staticmethod
    def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
        overrides = {}
        for env_key, field in ENV_KEYS.items():
            value = environ.get(env_key)
            if value:
                overrides[field] = value.strip().lower() if field == "log_format" else value
        return overrides
