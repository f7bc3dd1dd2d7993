from .aggregator import aggregate
from .renderer import DashboardWriter, build_chart_specs, render_dashboard

__all__ = [
    "aggregate",
    "build_chart_specs",
    "render_dashboard",
    "DashboardWriter",
]
