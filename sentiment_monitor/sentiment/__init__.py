"""
Sentiment classification for customer feedback.

Usage:
    from sentiment_monitor.sentiment import SentimentClassifier

    classifier = SentimentClassifier()
    result = await classifier.classify("Amazing service! Loved it!")
    print(f"{result.label}: {result.score:.2f}")
"""

from sentiment_monitor.sentiment.classifier import (
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    SentimentClassifier,
    fallback_classify,
    parse_inference_response,
)
from sentiment_monitor.sentiment.config import SentimentConfig
from sentiment_monitor.sentiment.schemas import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    VALID_SENTIMENT_LABELS,
    SentimentResult,
)

__all__ = [
    "SentimentClassifier",
    "SentimentConfig",
    "SentimentResult",
    "fallback_classify",
    "parse_inference_response",
    "POSITIVE_WORDS",
    "NEGATIVE_WORDS",
    "POSITIVE",
    "NEUTRAL",
    "NEGATIVE",
    "VALID_SENTIMENT_LABELS",
]
