"""Shared test utilities."""

from x_text.compose import TweetResult


class FakePoster:
    """In-memory TweetPoster for tests."""

    def __init__(self) -> None:
        self.posted: list[str] = []

    def create_tweet(self, text: str) -> TweetResult:
        self.posted.append(text)
        tweet_id = str(len(self.posted))
        return TweetResult(tweet_id=tweet_id, url=f"https://x.com/test/status/{tweet_id}")


class FixedLengthCalculator:
    """LengthCalculating stub that reports the same weight for any text."""

    def __init__(self, length: int, max_length: int = 280) -> None:
        self._length = length
        self._max_length = max_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def weighted_length(self, text: str) -> int:
        return self._length

    def remaining(self, text: str) -> int:
        return self._max_length - self._length

    def is_valid_length(self, text: str) -> bool:
        return 0 < self._length <= self._max_length


class NoUrlDetector:
    """UrlDetecting stub that never finds a URL."""

    def detect_urls(self, text: str) -> list[tuple[int, int]]:
        return []
