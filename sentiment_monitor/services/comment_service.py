"""
Comment service - scores new feedback and stores it.

Resolves which classifier mode applies to a user (server-wide settings
take precedence over the user's stored config), classifies the text,
draws an influence value and hands the record to the repository.
"""

import random

import structlog

from sentiment_monitor.config.settings import Settings, get_settings
from sentiment_monitor.observability.metrics import get_metrics
from sentiment_monitor.sentiment.classifier import SentimentClassifier
from sentiment_monitor.sentiment.schemas import SentimentResult
from sentiment_monitor.storage.repository import Repository
from sentiment_monitor.storage.schemas import MAX_INFLUENCE, Comment

logger = structlog.get_logger(__name__)

# Placeholder influence scoring: floor(random * 8) + 2, capped at 10
INFLUENCE_SPREAD = 8
INFLUENCE_BASE = 2


class CommentService:
    """
    Orchestrates classification and storage of comments.

    Usage:
        service = CommentService(repository, classifier)
        result = await service.analyze("u1", "Great food!")
        comment = await service.create_comment("u1", source="google", text="Great food!")
    """

    def __init__(
        self,
        repository: Repository,
        classifier: SentimentClassifier,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            repository: Comment/config storage
            classifier: Sentiment classifier
            settings: Server settings (uses cached settings if None)
            rng: Random source for influence values
        """
        self._repository = repository
        self._classifier = classifier
        self._settings = settings or get_settings()
        self._rng = rng or random.Random()

    async def resolve_mode(self, user_id: str) -> tuple[str | None, bool]:
        """
        Determine the token and demo flag that apply to ``user_id``.

        Returns:
            Tuple of (token or None, demo_mode)
        """
        config = await self._repository.get_config(user_id)
        token = self._settings.huggingface_api_token or (
            config.huggingface_token if config else None
        )
        demo_mode = self._settings.demo_mode or bool(config and config.demo_mode_enabled)
        return token, demo_mode

    async def analyze(self, user_id: str, text: str) -> SentimentResult:
        """Classify ``text`` with the mode configured for ``user_id``."""
        token, demo_mode = await self.resolve_mode(user_id)
        return await self._classifier.classify(text, token=token, demo_mode=demo_mode)

    def draw_influence(self) -> int:
        return min(
            MAX_INFLUENCE,
            int(self._rng.random() * INFLUENCE_SPREAD) + INFLUENCE_BASE,
        )

    async def create_comment(
        self,
        user_id: str,
        *,
        source: str,
        text: str,
        author_id: str | None = None,
        lang: str | None = "en",
        country: str | None = "US",
    ) -> Comment:
        """
        Score and store a new comment.

        Raises:
            ValueError: If the payload fails Comment validation
        """
        result = await self.analyze(user_id, text)
        draft = Comment(
            user_id=user_id,
            source=source,
            author_id=author_id,
            text=text,
            lang=lang if lang is not None else "en",
            country=country if country is not None else "US",
            sentiment_label=result.label,
            sentiment_score=result.score,
            influence=self.draw_influence(),
        )
        created = await self._repository.create_comment(draft)

        get_metrics().record_comment_created(
            created.source,
            created.sentiment_label,
            await self._repository.count_comments(),
        )
        logger.info(
            "Comment created",
            comment_id=created.id,
            source=created.source,
            sentiment_label=created.sentiment_label,
            influence=created.influence,
        )
        return created
