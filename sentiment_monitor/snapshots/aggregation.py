"""
Daily snapshot aggregation for dashboard charts.

Buckets a user's comments into UTC calendar days ending today (inclusive)
and computes per-day mention counts, reach, average score and label counts.

Usage:
    from sentiment_monitor.snapshots import SnapshotAggregator

    aggregator = SnapshotAggregator()
    snapshots = aggregator.build(comments, user_id="u1", range_="7d")
    for s in snapshots:
        print(s.ts.date(), s.mentions, s.avg_score)
"""

from collections import defaultdict
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable

import structlog

from sentiment_monitor.sentiment.schemas import NEGATIVE, NEUTRAL, POSITIVE
from sentiment_monitor.storage.schemas import Comment, Snapshot, ensure_utc, utcnow

logger = structlog.get_logger(__name__)

RANGE_DAYS: dict[str, int] = {"1d": 1, "7d": 7}
DEFAULT_RANGE_DAYS = 30

# Accepted for API compatibility. Bucketing is always daily.
VALID_GROUPS: frozenset[str] = frozenset({"day", "week", "month"})

REACH_PER_INFLUENCE = 100


def range_to_days(range_: str | None) -> int:
    """Map a range token to a window length: "1d" -> 1, "7d" -> 7, else 30."""
    return RANGE_DAYS.get(range_ or "", DEFAULT_RANGE_DAYS)


def day_start(day: date) -> datetime:
    """UTC midnight of ``day``."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class SnapshotAggregator:
    """
    Builds per-day Snapshot lists from comments.

    Comments are bucketed once by UTC date, so the cost is
    O(comments + days) rather than a scan per day.
    """

    def build(
        self,
        comments: Iterable[Comment],
        user_id: str | None,
        range_: str | None = None,
        group: str | None = None,
        now: datetime | None = None,
    ) -> list[Snapshot]:
        """
        Aggregate comments into daily snapshots, oldest first.

        Args:
            comments: Comments already restricted to the user
            user_id: Owner recorded on each snapshot
            range_: "1d", "7d" or anything else for 30 days
            group: Accepted but ignored; buckets are always one day
            now: Reference time (defaults to now UTC)

        Returns:
            One Snapshot per day in the window; empty days are zero-valued.
        """
        days = range_to_days(range_)
        if group and group != "day":
            logger.debug(
                "Snapshot grouping other than day requested, using daily buckets",
                group=group,
            )

        today = ensure_utc(now or utcnow()).date()
        first_day = today - timedelta(days=days - 1)

        buckets: dict[date, list[Comment]] = defaultdict(list)
        for comment in comments:
            if comment.created_at is None:
                continue
            day = ensure_utc(comment.created_at).date()
            if first_day <= day <= today:
                buckets[day].append(comment)

        snapshots = []
        for offset in range(days):
            day = first_day + timedelta(days=offset)
            snapshots.append(self._summarize(user_id, day, buckets.get(day, [])))
        return snapshots

    @staticmethod
    def _summarize(user_id: str | None, day: date, comments: list[Comment]) -> Snapshot:
        mentions = len(comments)
        reach = sum(c.effective_influence * REACH_PER_INFLUENCE for c in comments)
        avg_score = (
            sum(c.sentiment_score for c in comments) / mentions if mentions else 0.0
        )
        return Snapshot(
            user_id=user_id,
            ts=day_start(day),
            mentions=mentions,
            reach=reach,
            avg_score=avg_score,
            pos=sum(1 for c in comments if c.sentiment_label == POSITIVE),
            neu=sum(1 for c in comments if c.sentiment_label == NEUTRAL),
            neg=sum(1 for c in comments if c.sentiment_label == NEGATIVE),
        )
