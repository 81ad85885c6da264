"""Tests for the code point weight table."""

import pytest

from x_text.weights import (
    DEFAULT_CONFIG,
    DEFAULT_WEIGHT,
    EMOJI_WEIGHT,
    MAX_LENGTH,
    URL_WEIGHT,
    TextConfiguration,
    WeightRange,
    weight_of,
)


class TestConstants:
    def test_twitter_text_v3_values(self) -> None:
        assert (MAX_LENGTH, URL_WEIGHT, EMOJI_WEIGHT, DEFAULT_WEIGHT) == (280, 23, 2, 2)

    def test_default_config_uses_constants(self) -> None:
        assert DEFAULT_CONFIG.max_length == MAX_LENGTH
        assert DEFAULT_CONFIG.url_weight == URL_WEIGHT
        assert DEFAULT_CONFIG.emoji_weight == EMOJI_WEIGHT
        assert DEFAULT_CONFIG.default_weight == DEFAULT_WEIGHT

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_length = 10  # type: ignore[misc]


class TestWeightOf:
    @pytest.mark.parametrize("char", ["a", "Z", "5", " ", "\n", "é", "ж", "م", "ש", "ก", "ა"])
    def test_low_cost_scripts_weigh_one(self, char: str) -> None:
        assert weight_of(char) == 1

    @pytest.mark.parametrize("char", ["你", "안", "こ", "カ", "😀", "€"])
    def test_everything_else_weighs_two(self, char: str) -> None:
        assert weight_of(char) == 2

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (4351, 1),
            (4352, 2),
            (8191, 2),
            (8192, 1),
            (8205, 1),
            (8206, 2),
            (8208, 1),
            (8223, 1),
            (8224, 2),
            (8242, 1),
            (8247, 1),
            (8248, 2),
        ],
    )
    def test_range_boundaries(self, value: int, expected: int) -> None:
        assert weight_of(value) == expected

    def test_zero_width_joiner_weighs_one(self) -> None:
        assert weight_of("\u200d") == 1

    def test_custom_ranges_and_default(self) -> None:
        config = TextConfiguration(
            default_weight=3,
            ranges=(WeightRange(ord("a"), ord("z"), weight=1),),
        )
        assert weight_of("q", config) == 1
        assert weight_of("Q", config) == 3
