"""Per-day snapshot aggregation over stored comments."""

from sentiment_monitor.snapshots.aggregation import (
    DEFAULT_RANGE_DAYS,
    VALID_GROUPS,
    SnapshotAggregator,
    range_to_days,
)

__all__ = ["SnapshotAggregator", "range_to_days", "DEFAULT_RANGE_DAYS", "VALID_GROUPS"]
