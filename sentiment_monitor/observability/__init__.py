"""Observability layer - logging, metrics, and tracing."""

from sentiment_monitor.observability.logging import setup_logging
from sentiment_monitor.observability.metrics import MetricsCollector, get_metrics
from sentiment_monitor.observability.tracing import get_tracer, setup_tracing

__all__ = ["setup_logging", "MetricsCollector", "get_metrics", "setup_tracing", "get_tracer"]
