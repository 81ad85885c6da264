"""Emoji detection for grapheme clusters."""

from __future__ import annotations

from typing import Protocol

import regex

_EMOJI_PRESENTATION_RE = regex.compile(r"\p{Emoji_Presentation}")
_EMOJI_RE = regex.compile(r"\p{Emoji}")


class EmojiClassifying(Protocol):
    """Decides whether a grapheme cluster counts as one emoji."""

    def is_emoji(self, cluster: str) -> bool: ...


class EmojiClassifier:
    """Classify clusters with the emoji properties of the first code point.

    Single code points with default emoji presentation (😀) are emoji.
    Multi-code-point clusters whose first code point has the ``Emoji``
    property are emoji too: flags, skin tones, ZWJ sequences, keycaps.
    A lone digit or ``#`` has ``Emoji`` but not the presentation
    property, so it stays plain text.
    """

    def is_emoji(self, cluster: str) -> bool:
        if not cluster:
            return False
        first = cluster[0]
        if _EMOJI_PRESENTATION_RE.match(first):
            return True
        return len(cluster) > 1 and _EMOJI_RE.match(first) is not None


_DEFAULT = EmojiClassifier()


def is_emoji(cluster: str) -> bool:
    """Return True if *cluster* is weighed as an emoji."""
    return _DEFAULT.is_emoji(cluster)
