"""Sentiment monitoring backend for small-business feedback dashboards."""

__version__ = "0.1.0"
