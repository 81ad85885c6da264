"""Per-code-point weights following the twitter-text v3 configuration.

Twitter weighs text on an inverted model: every code point costs
``DEFAULT_WEIGHT`` unless it falls inside one of a few low-cost ranges.
See https://github.com/twitter/twitter-text/blob/master/config/v3.json
"""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_LENGTH = 280
URL_WEIGHT = 23
EMOJI_WEIGHT = 2
DEFAULT_WEIGHT = 2


@dataclass(frozen=True)
class WeightRange:
    """Inclusive range of code points ``[low, high]`` with a fixed weight."""

    low: int
    high: int
    weight: int = 1

    def __contains__(self, value: int) -> bool:
        return self.low <= value <= self.high


DEFAULT_RANGES: tuple[WeightRange, ...] = (
    WeightRange(0, 4351),  # U+0000-U+10FF: Latin, Cyrillic, Arabic, Thai, Georgian...
    WeightRange(8192, 8205),  # U+2000-U+200D: spaces, zero-width joiner
    WeightRange(8208, 8223),  # U+2010-U+201F: dashes, quotation marks
    WeightRange(8242, 8247),  # U+2032-U+2037: primes
)


@dataclass(frozen=True)
class TextConfiguration:
    """Counting rules for one text platform."""

    max_length: int = MAX_LENGTH
    url_weight: int = URL_WEIGHT
    emoji_weight: int = EMOJI_WEIGHT
    default_weight: int = DEFAULT_WEIGHT
    ranges: tuple[WeightRange, ...] = field(default=DEFAULT_RANGES)
    emoji_parsing_enabled: bool = True


DEFAULT_CONFIG = TextConfiguration()


def weight_of(scalar: str | int, config: TextConfiguration = DEFAULT_CONFIG) -> int:
    """Return the weight of a single code point (a 1-char string or an int)."""
    value = scalar if isinstance(scalar, int) else ord(scalar)
    for weight_range in config.ranges:
        if value in weight_range:
            return weight_range.weight
    return config.default_weight
