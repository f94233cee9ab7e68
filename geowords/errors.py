# geowords/errors.py
"""
Error taxonomy for the coordinate/word codec.

Input errors are the caller's to fix and are reported verbatim. Internal errors
mean the configuration or the code is wrong and are reported generically.
"""
from typing import Iterable, Optional


class GeoWordsError(Exception):
    """Base class for every error raised by geowords."""


class ConfigError(GeoWordsError):
    """Raised at startup when the region, vocabulary or settings are unusable."""


# --- Input errors ---

class InputError(GeoWordsError):
    """A request the caller can correct."""


class OutOfBoundsError(InputError):
    """A coordinate falls outside the configured region."""

    def __init__(self, lat: float, lng: float, bound: str, limit: float):
        self.lat = lat
        self.lng = lng
        self.bound = bound
        self.limit = limit
        super().__init__(
            f"Coordinates ({lat}, {lng}) are outside the region: "
            f"violates {bound} ({limit})"
        )


class UnknownWordError(InputError):
    """One or more words are not part of the vocabulary."""

    def __init__(self, words: Iterable[str]):
        self.words = list(words)
        super().__init__(f"Unknown word(s): {', '.join(self.words)}")


class InvalidRequestError(InputError):
    """A request payload has the wrong shape or types."""


# --- Internal errors ---

class InternalError(GeoWordsError):
    """An invariant was violated; indicates a bug or a bad configuration."""


class RangeError(InternalError):
    """A cell, linear index or vocabulary index lies outside its valid range."""

    def __init__(self, message: str, value: Optional[object] = None):
        self.value = value
        super().__init__(message)


class CodecOverflowError(InternalError):
    """A value cannot be represented with the codec's fixed number of digits."""
