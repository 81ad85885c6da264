"""Tweet text length helpers."""

from __future__ import annotations

import unicodedata
from typing import Protocol

import regex

from x_text.emoji import EmojiClassifier, EmojiClassifying
from x_text.urls import Span, UrlDetecting, UrlDetector
from x_text.weights import DEFAULT_CONFIG, TextConfiguration, weight_of

_GRAPHEME_RE = regex.compile(r"\X")


class LengthCalculating(Protocol):
    """Interface for weighted length counting."""

    @property
    def max_length(self) -> int: ...

    def weighted_length(self, text: str) -> int:
        """Return the weighted length of *text*."""
        ...

    def remaining(self, text: str) -> int:
        """Return how many weighted characters are left (may be negative)."""
        ...

    def is_valid_length(self, text: str) -> bool:
        """Return True if *text* is non-empty and within the limit."""
        ...


class TweetLengthCalculator:
    """Weighted length calculator following the twitter-text v3 rules.

    1. Text is NFC-normalized before anything else.
    2. Each detected URL counts as ``url_weight`` regardless of its length.
    3. Emoji grapheme clusters (flags, ZWJ sequences, skin tones) count as
       ``emoji_weight``.
    4. Every other cluster is the sum of its per-code-point weights.

    Usage::

        calculator = TweetLengthCalculator()
        calculator.weighted_length("Hello 😀")  # 8
    """

    def __init__(
        self,
        config: TextConfiguration = DEFAULT_CONFIG,
        *,
        url_detector: UrlDetecting | None = None,
        emoji_classifier: EmojiClassifying | None = None,
    ) -> None:
        self._config = config
        self._url_detector = url_detector or UrlDetector()
        self._emoji_classifier = emoji_classifier or EmojiClassifier()

    @property
    def config(self) -> TextConfiguration:
        return self._config

    @property
    def max_length(self) -> int:
        return self._config.max_length

    def weighted_length(self, text: str) -> int:
        if not text:
            return 0

        normalized = unicodedata.normalize("NFC", text)
        spans = _merge_spans(self._url_detector.detect_urls(normalized))

        remainder = normalized
        for start, end in reversed(spans):
            remainder = remainder[:start] + remainder[end:]

        length = sum(
            self._cluster_weight(cluster)
            for cluster in _GRAPHEME_RE.findall(remainder)
        )
        return length + len(spans) * self._config.url_weight

    def remaining(self, text: str) -> int:
        return self._config.max_length - self.weighted_length(text)

    def is_valid_length(self, text: str) -> bool:
        length = self.weighted_length(text)
        return 0 < length <= self._config.max_length

    def _cluster_weight(self, cluster: str) -> int:
        if self._config.emoji_parsing_enabled and self._emoji_classifier.is_emoji(cluster):
            return self._config.emoji_weight
        return sum(weight_of(scalar, self._config) for scalar in cluster)


def _merge_spans(spans: list[Span]) -> list[Span]:
    """Sort spans and fold overlapping ones together."""
    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    return merged


_DEFAULT = TweetLengthCalculator()


def weighted_length(text: str) -> int:
    """Return tweet length using X weighted counting rules."""
    return _DEFAULT.weighted_length(text)


def remaining(text: str) -> int:
    """Return ``MAX_LENGTH - weighted_length(text)``; negative when over."""
    return _DEFAULT.remaining(text)


def is_valid_length(text: str) -> bool:
    """Return True if ``0 < weighted_length(text) <= MAX_LENGTH``."""
    return _DEFAULT.is_valid_length(text)
