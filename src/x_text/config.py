"""Load counting rules from a twitter-text style JSON config."""

from __future__ import annotations

import json
import pathlib
from typing import Any

from x_text.errors import ConfigError
from x_text.weights import DEFAULT_CONFIG, TextConfiguration, WeightRange


def load_config(path: pathlib.Path) -> TextConfiguration:
    """Read a twitter-text config file (e.g. ``config/v3.json``).

    Keys missing from the file keep their default values. Raises
    ``ConfigError`` if the file is not valid JSON or the values are unusable.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a JSON object.")
    return config_from_dict(data)


def config_from_dict(data: dict[str, Any]) -> TextConfiguration:
    """Build a ``TextConfiguration`` from twitter-text config keys.

    Weights in the file are scaled (``scale`` = 100 means a weight of 200
    counts as 2); they are divided back down here. ``emojiWeight`` is an
    extension key; without it emoji clusters cost ``defaultWeight``.
    """
    scale = _positive_int(data, "scale", 1)
    default_weight = _scaled(
        _positive_int(data, "defaultWeight", DEFAULT_CONFIG.default_weight * scale),
        scale,
        "defaultWeight",
    )

    ranges = DEFAULT_CONFIG.ranges
    if "ranges" in data:
        if not isinstance(data["ranges"], list):
            raise ConfigError("'ranges' must be a list.")
        ranges = tuple(_parse_range(item, scale) for item in data["ranges"])

    return TextConfiguration(
        max_length=_positive_int(data, "maxWeightedTweetLength", DEFAULT_CONFIG.max_length),
        url_weight=_positive_int(data, "transformedURLLength", DEFAULT_CONFIG.url_weight),
        emoji_weight=_scaled(
            _positive_int(data, "emojiWeight", default_weight * scale),
            scale,
            "emojiWeight",
        ),
        default_weight=default_weight,
        ranges=ranges,
        emoji_parsing_enabled=bool(
            data.get("emojiParsingEnabled", DEFAULT_CONFIG.emoji_parsing_enabled),
        ),
    )


def _parse_range(item: Any, scale: int) -> WeightRange:
    if not isinstance(item, dict):
        raise ConfigError(f"Invalid range entry: {item!r}")
    start = item.get("start")
    end = item.get("end")
    weight = item.get("weight")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (start, end, weight)):
        raise ConfigError(f"Range needs integer start, end and weight: {item!r}")
    if start < 0 or start > end:
        raise ConfigError(f"Invalid range bounds: {start}-{end}")
    return WeightRange(start, end, _scaled(weight, scale, "range weight"))


def _positive_int(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def _scaled(weight: int, scale: int, name: str) -> int:
    if weight <= 0 or weight % scale:
        raise ConfigError(f"{name} {weight} is not a positive multiple of scale {scale}")
    return weight // scale
