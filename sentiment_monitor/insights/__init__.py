"""Static insight content served alongside the comment data."""

from sentiment_monitor.insights.catalog import (
    REPORT_KINDS,
    acknowledge_report,
    get_geo_points,
    get_suggestions,
    get_topic_breakdown,
)

__all__ = [
    "REPORT_KINDS",
    "acknowledge_report",
    "get_geo_points",
    "get_suggestions",
    "get_topic_breakdown",
]
