"""Services that orchestrate classification and storage."""

from sentiment_monitor.services.comment_service import CommentService

__all__ = ["CommentService"]
