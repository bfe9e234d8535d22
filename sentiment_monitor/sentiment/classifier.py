"""
Sentiment classification for customer feedback.

Two modes:
- Heuristic: counts hits from fixed positive/negative keyword lists and
  draws a score inside the range that belongs to the winning label.
- Remote: asks a Hugging Face inference endpoint for POSITIVE/NEGATIVE
  scores. Any failure degrades to a reduced keyword check with fixed
  scores; classify() never raises.

The random source is injected so tests can seed it.
"""

import random
import time

import httpx
import structlog

from sentiment_monitor.observability.metrics import get_metrics
from sentiment_monitor.sentiment.config import SentimentConfig
from sentiment_monitor.sentiment.schemas import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    SentimentResult,
)

logger = structlog.get_logger(__name__)

POSITIVE_WORDS: tuple[str, ...] = (
    "amazing",
    "excellent",
    "great",
    "love",
    "wonderful",
    "fantastic",
    "perfect",
    "best",
    "awesome",
    "delicious",
)

NEGATIVE_WORDS: tuple[str, ...] = (
    "terrible",
    "awful",
    "worst",
    "hate",
    "horrible",
    "disgusting",
    "bad",
    "disappointing",
    "slow",
    "rude",
)

# (low, width): score = low + random() * width
POSITIVE_SCORE_RANGE = (0.7, 0.3)
NEGATIVE_SCORE_RANGE = (0.0, 0.4)
NEUTRAL_SCORE_RANGE = (0.4, 0.2)

# Reduced word lists and fixed scores used when the remote call fails
FALLBACK_POSITIVE_WORDS: tuple[str, ...] = ("good", "great")
FALLBACK_NEGATIVE_WORDS: tuple[str, ...] = ("bad", "terrible")
FALLBACK_POSITIVE_SCORE = 0.8
FALLBACK_NEGATIVE_SCORE = 0.2
FALLBACK_NEUTRAL_SCORE = 0.5


def count_keyword_hits(text: str, words: tuple[str, ...]) -> int:
    """Count how many of ``words`` occur in ``text`` (case-insensitive substring)."""
    lowered = text.lower()
    return sum(1 for word in words if word in lowered)


def fallback_classify(text: str) -> SentimentResult:
    """Reduced keyword check used after a failed remote classification."""
    if count_keyword_hits(text, FALLBACK_POSITIVE_WORDS):
        return SentimentResult(POSITIVE, FALLBACK_POSITIVE_SCORE)
    if count_keyword_hits(text, FALLBACK_NEGATIVE_WORDS):
        return SentimentResult(NEGATIVE, FALLBACK_NEGATIVE_SCORE)
    return SentimentResult(NEUTRAL, FALLBACK_NEUTRAL_SCORE)


class RemoteResponseError(ValueError):
    """Raised when the inference endpoint returns an unusable payload."""


class SentimentClassifier:
    """
    Maps free text to a sentiment label and a score in [0, 1].

    Usage:
        classifier = SentimentClassifier(rng=random.Random(7))

        result = await classifier.classify("Amazing service!")
        print(result.label, result.score)

        # Remote mode when a token is available and demo mode is off
        result = await classifier.classify(text, token="hf_...", demo_mode=False)
    """

    def __init__(
        self,
        config: SentimentConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the classifier.

        Args:
            config: Classifier configuration (uses defaults if None)
            http_client: Client for remote calls (created lazily if None)
            rng: Random source for heuristic scores (seeded from config if None)
        """
        self._config = config or SentimentConfig()
        self._client = http_client
        self._owns_client = http_client is None
        self._rng = rng or random.Random(self._config.seed)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.request_timeout_seconds,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this classifier created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def select_mode(token: str | None, demo_mode: bool) -> str:
        """Return "heuristic" or "remote" for the given token and flag."""
        if demo_mode or not token:
            return "heuristic"
        return "remote"

    async def classify(
        self,
        text: str,
        *,
        token: str | None = None,
        demo_mode: bool = False,
    ) -> SentimentResult:
        """
        Classify a single text.

        Args:
            text: Non-empty text to classify
            token: Hugging Face API token; heuristic mode when missing
            demo_mode: Force heuristic mode

        Returns:
            SentimentResult with label and score
        """
        start = time.perf_counter()

        if self.select_mode(token, demo_mode) == "heuristic":
            result = self.classify_heuristic(text)
            mode = "heuristic"
        else:
            result, mode = await self._classify_remote(text, token)  # type: ignore[arg-type]

        get_metrics().record_classification(
            mode, result.label, time.perf_counter() - start
        )
        return result

    def classify_heuristic(self, text: str) -> SentimentResult:
        """Keyword-count classification with a random score inside the label's range."""
        positive = count_keyword_hits(text, POSITIVE_WORDS)
        negative = count_keyword_hits(text, NEGATIVE_WORDS)

        if positive > negative:
            label, (low, width) = POSITIVE, POSITIVE_SCORE_RANGE
        elif negative > positive:
            label, (low, width) = NEGATIVE, NEGATIVE_SCORE_RANGE
        else:
            label, (low, width) = NEUTRAL, NEUTRAL_SCORE_RANGE

        return SentimentResult(label, low + self._rng.random() * width)

    async def _classify_remote(
        self, text: str, token: str
    ) -> tuple[SentimentResult, str]:
        """Call the inference endpoint, falling back locally on any failure."""
        try:
            response = await self._get_client().post(
                self._config.inference_url,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
                json={"inputs": text},
            )
            response.raise_for_status()
            return parse_inference_response(response.json()), "remote"
        except httpx.TimeoutException as e:
            reason = "timeout"
            error = e
        except httpx.HTTPStatusError as e:
            reason = "http_status"
            error = e
        except httpx.HTTPError as e:
            reason = "transport"
            error = e
        except ValueError as e:
            reason = "malformed_response"
            error = e

        logger.warning(
            "Remote sentiment analysis failed, using fallback",
            reason=reason,
            error=str(error),
        )
        get_metrics().record_fallback(reason)
        return fallback_classify(text), "fallback"


def parse_inference_response(payload: object) -> SentimentResult:
    """
    Interpret a Hugging Face text-classification payload.

    Expected shape: ``[[{"label": "POSITIVE", "score": p}, {"label": "NEGATIVE", "score": n}]]``.
    The higher of the two labels wins (NEGATIVE on ties). When either label
    is missing the text is reported NEUTRAL with score 0.5.

    Raises:
        RemoteResponseError: If a label entry has a non-numeric score
    """
    if not (isinstance(payload, list) and payload and isinstance(payload[0], list)):
        return SentimentResult(NEUTRAL, FALLBACK_NEUTRAL_SCORE)

    scores: dict[str, float] = {}
    for entry in payload[0]:
        if not isinstance(entry, dict):
            continue
        label = str(entry.get("label", "")).upper()
        if label in (POSITIVE, NEGATIVE) and label not in scores:
            try:
                scores[label] = float(entry["score"])
            except (KeyError, TypeError, ValueError) as e:
                raise RemoteResponseError(f"Invalid score for {label}: {entry!r}") from e

    if POSITIVE not in scores or NEGATIVE not in scores:
        return SentimentResult(NEUTRAL, FALLBACK_NEUTRAL_SCORE)

    if scores[POSITIVE] > scores[NEGATIVE]:
        label = POSITIVE
    else:
        label = NEGATIVE
    return SentimentResult(label, min(1.0, max(0.0, scores[label])))
