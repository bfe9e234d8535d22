"""
Static dashboard content: action suggestions, topic breakdown, geo points
and report-export acknowledgements.

Report exports are acknowledgements only; no file is produced.
"""

from dataclasses import asdict, dataclass

from sentiment_monitor.sentiment.schemas import NEGATIVE, NEUTRAL, POSITIVE


@dataclass(frozen=True)
class Suggestion:
    id: str
    category: str
    title: str
    body: str


@dataclass(frozen=True)
class TopicBreakdown:
    label: str
    count: int
    score: float | None = None


@dataclass(frozen=True)
class GeoPoint:
    country: str
    mentions: int
    reach: int
    interactions: int


SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion("1", POSITIVE, "Amplify Success",
               "Share customer success stories on social media to build momentum."),
    Suggestion("2", POSITIVE, "Reward Loyalty",
               "Create a loyalty program for customers who leave positive reviews."),
    Suggestion("3", NEUTRAL, "Follow Up",
               "Reach out to neutral customers with a personalized thank you and feedback request."),
    Suggestion("4", NEUTRAL, "Improve Experience",
               "Analyze neutral feedback for specific areas of improvement."),
    Suggestion("5", NEGATIVE, "Immediate Response",
               "Respond to negative feedback within 2 hours with a genuine apology and solution."),
    Suggestion("6", NEGATIVE, "Process Improvement",
               "Review internal processes that may be causing customer dissatisfaction."),
)

TOPIC_BREAKDOWN: tuple[TopicBreakdown, ...] = (
    TopicBreakdown("Service Quality", 45, 0.82),
    TopicBreakdown("Product Quality", 38, 0.76),
    TopicBreakdown("Staff Friendliness", 32, 0.89),
    TopicBreakdown("Wait Times", 28, 0.34),
    TopicBreakdown("Cleanliness", 22, 0.91),
    TopicBreakdown("Value for Money", 19, 0.67),
)

GEO_POINTS: tuple[GeoPoint, ...] = (
    GeoPoint("US", 342, 15600, 1240),
    GeoPoint("UK", 89, 4200, 380),
    GeoPoint("CA", 67, 3100, 290),
    GeoPoint("AU", 45, 2200, 180),
    GeoPoint("IN", 156, 7800, 620),
)

# kind -> (message, download path)
REPORT_KINDS: dict[str, tuple[str, str]] = {
    "pdf": ("PDF report generated", "/api/download/report.pdf"),
    "excel": ("Excel report generated", "/api/download/report.xlsx"),
    "infographic": ("Infographic generated", "/api/download/infographic.png"),
}


def get_suggestions(category: str | None = None) -> list[dict]:
    """All suggestions, or only those in ``category`` when given."""
    return [
        asdict(s) for s in SUGGESTIONS
        if not category or s.category == category
    ]


def get_topic_breakdown() -> list[dict]:
    return [asdict(t) for t in TOPIC_BREAKDOWN]


def get_geo_points() -> list[dict]:
    return [asdict(g) for g in GEO_POINTS]


def acknowledge_report(kind: str) -> dict[str, str]:
    """
    Acknowledge a report export request.

    Raises:
        KeyError: If ``kind`` is not a known report type
    """
    message, download_url = REPORT_KINDS[kind]
    return {"message": message, "downloadUrl": download_url}
