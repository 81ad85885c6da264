"""Errors surfaced to callers that post or configure tweet text."""


class TweetTextError(ValueError):
    """Base class for tweet text problems that a user can act on."""


class EmptyTweetError(TweetTextError):
    def __init__(self) -> None:
        super().__init__("Empty tweet text, aborting.")


class TweetTooLongError(TweetTextError):
    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(f"Tweet too long: {length}/{max_length} characters.")
        self.length = length
        self.max_length = max_length


class ConfigError(TweetTextError):
    """Raised when a text configuration file cannot be used."""
