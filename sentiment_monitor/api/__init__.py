"""
FastAPI service for the sentiment monitoring dashboard.

Provides REST endpoints for:
- /api/comments - Filtered comment listing and submission
- /api/analyze - Ad-hoc sentiment classification
- /api/snapshots - Daily aggregates
- /api/config - Per-user settings
"""

from sentiment_monitor.api.app import create_app

__all__ = ["create_app"]
