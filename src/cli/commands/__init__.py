"""CLI command modules."""

from .chart import chart
from .checkin import checkin
from .dashboard import dashboard, history
from .export import export
from .insights import insights
from .recommend import recommend

__all__ = [
    "checkin",
    "dashboard",
    "history",
    "chart",
    "insights",
    "recommend",
    "export",
]
