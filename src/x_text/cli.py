"""CLI entry-point for x-text-count."""

import argparse
import pathlib
import sys

from x_text.config import load_config
from x_text.counter import counter_state
from x_text.errors import TweetTextError
from x_text.text import TweetLengthCalculator
from x_text.validator import TweetValidator


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count a tweet's weighted length using X's rules.",
    )
    parser.add_argument("text", nargs="?", help="Tweet text (inline)")
    parser.add_argument(
        "--from-file", type=pathlib.Path, help="Read tweet text from a file",
    )
    parser.add_argument(
        "--config",
        type=pathlib.Path,
        metavar="PATH",
        help="twitter-text JSON config to count with (default: v3 rules)",
    )
    return parser.parse_args(argv)


def _read_post_text(args: argparse.Namespace) -> str:
    if args.text:
        return args.text
    if args.from_file:
        return args.from_file.read_text(encoding="utf-8").removesuffix("\n")
    print("Enter tweet text (Ctrl+D to finish):")
    return sys.stdin.read().removesuffix("\n")


def _build_validator(config_path: pathlib.Path | None) -> TweetValidator:
    if config_path is None:
        return TweetValidator()
    return TweetValidator(TweetLengthCalculator(load_config(config_path)))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        validator = _build_validator(args.config)
    except TweetTextError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    text = _read_post_text(args)
    state = counter_state(text, validator=validator)
    print(f"Weighted length: {state}")
    print(f"Remaining: {state.remaining}")

    try:
        validator.ensure_can_send(text)
    except TweetTextError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
