"""Character counter state for composer front-ends."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from x_text.validator import TweetValidator

_WARNING_THRESHOLD = 20


class CounterLevel(enum.Enum):
    """How close a message is to the length limit."""

    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class CounterState:
    """Snapshot of the counter for one piece of text."""

    typed: int
    remaining: int
    max_length: int
    can_send: bool

    @property
    def level(self) -> CounterLevel:
        if self.remaining < 0:
            return CounterLevel.OVER
        if self.remaining <= _WARNING_THRESHOLD:
            return CounterLevel.WARNING
        return CounterLevel.OK

    def __str__(self) -> str:
        return f"{self.typed}/{self.max_length}"


def counter_state(text: str, *, validator: TweetValidator | None = None) -> CounterState:
    """Return the counter snapshot for *text* under *validator*'s rules."""
    validator = validator or TweetValidator()
    calculator = validator.calculator
    typed = calculator.weighted_length(text)
    return CounterState(
        typed=typed,
        remaining=calculator.max_length - typed,
        max_length=calculator.max_length,
        can_send=validator.can_send(text),
    )
