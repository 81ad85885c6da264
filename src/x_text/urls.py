"""URL detection for weighted length counting.

Every detected URL is collapsed to a fixed cost by the calculator, so the
detector only reports where URLs are, as ``(start, end)`` offsets into the
text it was given.
"""

from __future__ import annotations

import re
from typing import Protocol

Span = tuple[int, int]

# URL-legal ASCII only in the authority; paths also take Latin and
# Cyrillic letters. Anything else (emoji, CJK, full-width punctuation)
# ends the URL.
_AUTHORITY_CHAR = r"[A-Za-z0-9\-._~%!$&'()*+,;=:@\[\]]"
_PATH_CHAR = r"[A-Za-z0-9\-._~%!$&'()*+,;=:@\[\]/?\#\u00c0-\u024f\u0400-\u04ff]"

_URL_RE = re.compile(
    r"""
    (?<![\w@.\-/:])
    (?:
        (?P<scheme>(?i:https?)://)""" + _AUTHORITY_CHAR + r"""+
        (?:[/?\#]""" + _PATH_CHAR + r"""*)?
      |
        (?P<host>(?:[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?\.)+)
        (?P<tld>[A-Za-z]{2,63})(?![A-Za-z0-9\-@])
        (?::[0-9]{1,5})?
        (?:[/?\#]""" + _PATH_CHAR + r"""*)?
    )
    """,
    flags=re.VERBOSE,
)
_TRAILING_PUNCTUATION = ".,!?;:'\""

# TLDs accepted without a scheme or path. Any other two-letter country
# code only counts when a path follows (``bit.ly/x`` but not ``node.js``).
_BARE_TLDS = frozenset({
    "com", "net", "org", "edu", "gov", "mil", "int", "info", "biz", "name",
    "pro", "app", "dev", "blog", "news", "online", "site", "store", "shop",
    "tech", "cloud", "page", "link", "live", "xyz", "art", "design",
    "co", "io", "ai", "me", "tv", "ly", "gg", "fm",
})


class UrlDetecting(Protocol):
    """Finds URL spans in (already normalized) text."""

    def detect_urls(self, text: str) -> list[Span]: ...


class UrlDetector:
    """Regex-based link detector for ``http(s)://`` URLs and bare domains."""

    def detect_urls(self, text: str) -> list[Span]:
        spans: list[Span] = []
        for match in _URL_RE.finditer(text):
            url, _ = _split_url_and_suffix(match.group(0))
            if not _is_url(match, url):
                continue
            start = match.start()
            spans.append((start, start + len(url)))
        return spans


def _is_url(match: re.Match[str], url: str) -> bool:
    scheme = match.group("scheme")
    if scheme is not None:
        return len(url) > len(scheme)
    tld = match.group("tld").lower()
    if tld in _BARE_TLDS:
        return True
    tail = url[len(match.group("host")) + len(tld):]
    return len(tld) == 2 and "/" in tail


def _split_url_and_suffix(candidate: str) -> tuple[str, str]:
    """Split URL candidate from trailing punctuation that is not part of it."""
    suffix_chars: list[str] = []
    url = candidate

    while url:
        last = url[-1]
        if last in _TRAILING_PUNCTUATION:
            suffix_chars.append(last)
            url = url[:-1]
            continue
        if last == ")" and url.count(")") > url.count("("):
            suffix_chars.append(last)
            url = url[:-1]
            continue
        break

    return url, "".join(reversed(suffix_chars))


_DEFAULT = UrlDetector()


def detect_urls(text: str) -> list[Span]:
    """Return the ``(start, end)`` spans of every URL in *text*, left to right."""
    return _DEFAULT.detect_urls(text)
