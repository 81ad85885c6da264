"""Decides whether a tweet can be sent."""

from __future__ import annotations

from typing import Protocol

from x_text.errors import EmptyTweetError, TweetTooLongError
from x_text.text import LengthCalculating, TweetLengthCalculator


class MessageValidating(Protocol):
    """Interface for the "can this be posted" policy."""

    def can_send(self, text: str) -> bool: ...


class TweetValidator:
    """Combines the length rule with a no-blank-tweets rule.

    Blankness is checked on the stripped text, while the length is always
    measured on the original text.
    """

    def __init__(self, calculator: LengthCalculating | None = None) -> None:
        self._calculator = calculator or TweetLengthCalculator()

    @property
    def calculator(self) -> LengthCalculating:
        return self._calculator

    def can_send(self, text: str) -> bool:
        if not text.strip():
            return False
        return self._calculator.is_valid_length(text)

    def ensure_can_send(self, text: str) -> None:
        """Raise a ``TweetTextError`` if *text* cannot be sent.

        Raises ``EmptyTweetError`` for blank text and ``TweetTooLongError``
        when the weighted length exceeds the limit.
        """
        if not text.strip():
            raise EmptyTweetError()
        length = self._calculator.weighted_length(text)
        if length > self._calculator.max_length:
            raise TweetTooLongError(length, self._calculator.max_length)


_DEFAULT = TweetValidator()


def can_send(text: str) -> bool:
    """Return True if *text* is non-blank and within the length limit."""
    return _DEFAULT.can_send(text)
