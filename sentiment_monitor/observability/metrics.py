"""
Prometheus metrics for the sentiment-monitor service.

Defines metrics for:
- Sentiment classifications by mode and label
- Remote classifier fallbacks
- Classification latency
- Comments created
- Persistence failures

Metrics are exposed on the API's /metrics endpoint for Prometheus scraping.
"""

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
)

# Buckets for latency histograms (in seconds)
LATENCY_BUCKETS = (0.001, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class MetricsCollector:
    """
    Prometheus metrics collector.

    Usage:
        metrics = get_metrics()
        metrics.record_classification("heuristic", "POSITIVE", 0.002)
        metrics.record_fallback("timeout")
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        self.registry = registry

        self.classifications = Counter(
            "sentiment_monitor_classifications_total",
            "Total texts classified",
            ["mode", "label"],  # mode: heuristic, remote, fallback
            registry=registry,
        )

        self.classifier_fallbacks = Counter(
            "sentiment_monitor_classifier_fallbacks_total",
            "Remote classifications that fell back to the local heuristic",
            ["reason"],
            registry=registry,
        )

        self.classification_latency = Histogram(
            "sentiment_monitor_classification_latency_seconds",
            "Time to classify a single text",
            ["mode"],
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )

        self.comments_created = Counter(
            "sentiment_monitor_comments_created_total",
            "Total comments created",
            ["source", "label"],
            registry=registry,
        )

        self.comments_stored = Gauge(
            "sentiment_monitor_comments_stored",
            "Number of comments currently held in the store",
            registry=registry,
        )

        self.persistence_errors = Counter(
            "sentiment_monitor_persistence_errors_total",
            "Failed best-effort storage snapshot writes",
            registry=registry,
        )

    def record_classification(self, mode: str, label: str, latency: float) -> None:
        """Record a completed classification."""
        self.classifications.labels(mode=mode, label=label).inc()
        self.classification_latency.labels(mode=mode).observe(latency)

    def record_fallback(self, reason: str) -> None:
        """Record a remote classification that degraded to the fallback."""
        self.classifier_fallbacks.labels(reason=reason).inc()

    def record_comment_created(self, source: str, label: str, stored: int) -> None:
        """Record a new comment and the resulting store size."""
        self.comments_created.labels(source=source, label=label).inc()
        self.comments_stored.set(stored)

    def record_store_size(self, stored: int) -> None:
        """Set the stored-comment gauge, e.g. after loading seed data."""
        self.comments_stored.set(stored)

    def record_persistence_error(self) -> None:
        self.persistence_errors.inc()


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
