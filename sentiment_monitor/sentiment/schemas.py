"""Sentiment labels and classification results."""

from dataclasses import dataclass

POSITIVE = "POSITIVE"
NEUTRAL = "NEUTRAL"
NEGATIVE = "NEGATIVE"

VALID_SENTIMENT_LABELS: frozenset[str] = frozenset({POSITIVE, NEUTRAL, NEGATIVE})


@dataclass(frozen=True)
class SentimentResult:
    """
    Outcome of classifying one text.

    Attributes:
        label: POSITIVE, NEUTRAL or NEGATIVE.
        score: Confidence/polarity score in [0, 1].
    """

    label: str
    score: float

    def __post_init__(self) -> None:
        if self.label not in VALID_SENTIMENT_LABELS:
            raise ValueError(f"Invalid label: {self.label}")
        if not (0.0 <= self.score <= 1.0):
            raise ValueError(f"Score must be 0-1, got {self.score}")
