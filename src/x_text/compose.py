"""Posting contract between the text rules and an X API client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from x_text.validator import TweetValidator


@dataclass(frozen=True)
class TweetResult:
    """Result of publishing a tweet."""

    tweet_id: str
    url: str


class TweetPoster(Protocol):
    """Interface for whatever actually publishes the tweet."""

    def create_tweet(self, text: str) -> TweetResult:
        """Publish a tweet and return the result with ID and URL."""
        ...


class PostTweetUseCase:
    """Validate tweet text, then hand it to a ``TweetPoster``.

    Invalid text never reaches the poster: ``execute`` raises
    ``EmptyTweetError`` or ``TweetTooLongError`` first.
    """

    def __init__(
        self,
        poster: TweetPoster,
        *,
        validator: TweetValidator | None = None,
    ) -> None:
        self._poster = poster
        self._validator = validator or TweetValidator()

    def execute(self, text: str) -> TweetResult:
        self._validator.ensure_can_send(text)
        return self._poster.create_tweet(text)
