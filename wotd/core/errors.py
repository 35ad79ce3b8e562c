"""Exception types raised by wotd."""


class WotdError(Exception):
    """Base class for all errors surfaced to the user."""


class FetchError(WotdError):
    """A URL could not be fetched or decoded."""

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"{url} returned status {status_code}"
        else:
            message = f"{url}: {reason or 'request failed'}"
        super().__init__(message)


class SourceUnavailableError(WotdError):
    """The default word list could not be loaded."""


class MalformedCustomListError(WotdError):
    """The custom word file is unreadable, unparseable or not a JSON array."""


class EmptyPoolError(WotdError):
    """Both word sources yielded nothing."""

    def __init__(self) -> None:
        super().__init__("Word list is empty. Cannot select a word of the day.")


class WordNotFoundError(WotdError):
    """The dictionary has no entry for the word."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f'Sorry, could not find definitions for "{word}".')


class ApiFailureError(WotdError):
    """The dictionary request failed for a reason other than a missing word."""

    def __init__(self, status_code: int | None = None, reason: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"API request failed with status: {status_code}"
        else:
            message = f"API request failed: {reason or 'unknown error'}"
        super().__init__(message)
