from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from querytrack.core.config_loader import QueryTrackConfig
from querytrack.core.errors import StoreIOError
from querytrack.core.models import AggregateReport
from querytrack.utils.logger import setup_logger

logger = setup_logger(__name__)

TEMPLATE_NAME = "dashboard.html"

_env = Environment(
    loader=PackageLoader("querytrack.report", "templates"),
    autoescape=select_autoescape(),
)

CATEGORY_COLOR = "#5a7a9f"
MODEL_COLOR = "#7591b3"
DAILY_COLOR = "#5a7a9f"


def format_day(day) -> str:
    """Label a calendar day as M/D/YYYY."""
    return f"{day.month}/{day.day}/{day.year}"


def build_chart_specs(report: AggregateReport) -> dict[str, dict[str, Any]]:
    """Series and labels for the three dashboard charts, keyed by canvas id."""
    return {
        "categoryChart": {
            "orientation": "horizontal",
            "datasetLabel": "Percentage",
            "unit": "%",
            "color": CATEGORY_COLOR,
            "labels": [entry.label for entry in report.category_breakdown],
            "values": [entry.percent for entry in report.category_breakdown],
        },
        "modelChart": {
            "orientation": "horizontal",
            "datasetLabel": "Percentage",
            "unit": "%",
            "color": MODEL_COLOR,
            "labels": [entry.label for entry in report.model_breakdown],
            "values": [entry.percent for entry in report.model_breakdown],
        },
        "dailyChart": {
            "orientation": "vertical",
            "datasetLabel": "Queries",
            "unit": "",
            "color": DAILY_COLOR,
            "labels": [format_day(point.day) for point in report.daily_series],
            "values": [point.count for point in report.daily_series],
        },
    }


def render_dashboard(
    report: AggregateReport,
    title: str = "Query Analytics Dashboard",
    subtitle: str = "",
) -> str:
    """Produce the self-contained dashboard page for a report.

    Title and subtitle are HTML-escaped; chart data goes through `tojson`, so
    label text cannot close the inline script.
    """
    template = _env.get_template(TEMPLATE_NAME)
    return template.render(
        title=title,
        subtitle=subtitle,
        today_count=report.today_count,
        avg_per_day=report.avg_per_day,
        category_count=report.distinct_categories,
        max_daily_count=report.max_daily_count,
        chart_specs=build_chart_specs(report),
    )


class DashboardWriter:
    """Persist rendered dashboards and optionally hand them to a viewer."""

    def __init__(self, config: QueryTrackConfig, opener: Callable[[Path], Any] | None = None):
        self.path = Path(config.dashboard_path)
        self.title = config.dashboard_title
        self.subtitle = config.dashboard_subtitle
        self.opener = opener

    def write(self, report: AggregateReport) -> Path:
        document = render_dashboard(report, title=self.title, subtitle=self.subtitle)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise StoreIOError(f"Failed to write dashboard {self.path}: {e}", path=self.path) from e
        logger.info(f"Dashboard written to {self.path}")

        if self.opener is not None:
            try:
                self.opener(self.path)
            except Exception as e:
                logger.debug(f"Could not open dashboard in viewer: {e}")

        return self.path
