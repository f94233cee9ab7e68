# geowords/converter.py
import re
from typing import Sequence, Union

from .codec import WORD_COUNT, WordCodec
from .errors import ConfigError, InvalidRequestError
from .grid import Cell, CellLinearizer, Coordinates, GridIndexer
from .region import RegionConfig
from .vocabulary import VocabularyTable, normalize_word

# Separators accepted between words written as a single string
WORD_SEPARATORS = re.compile(r"[.,\-\s]+")


def parse_words(value: Union[str, Sequence[str]]) -> tuple[str, ...]:
    """
    Turn user input into a normalized word tuple.

    Args:
        value: A sequence of words, or one string with the words separated by
            dots, commas, hyphens or whitespace (e.g. "Bababa.Babade.Bababe").

    Returns:
        The lowercase words as a tuple.

    Raises:
        InvalidRequestError: If the input does not hold exactly three words.
    """
    if isinstance(value, str):
        parts = [p for p in WORD_SEPARATORS.split(value.strip()) if p]
    elif isinstance(value, (list, tuple)):
        if not all(isinstance(p, str) for p in value):
            raise InvalidRequestError(f"Words must be an array of exactly {WORD_COUNT} strings")
        parts = list(value)
    else:
        raise InvalidRequestError(f"Words must be an array of exactly {WORD_COUNT} strings")

    words = tuple(normalize_word(p) for p in parts)
    if len(words) != WORD_COUNT or not all(words):
        raise InvalidRequestError(
            f"Words must be an array of exactly {WORD_COUNT} strings, got {len(words)}"
        )
    return words


def format_words(words: Sequence[str], separator: str = ".") -> str:
    return separator.join(words)


class CoordinateWordConverter:
    """
    Converts coordinates to three-word identifiers and back.

    Composes the grid indexer, the row-major linearizer and the word codec. All
    parts are immutable once built, so one converter can serve any number of
    concurrent callers.
    """

    def __init__(self, region: RegionConfig, vocabulary: VocabularyTable):
        self.region = region
        self.vocabulary = vocabulary
        self.indexer = GridIndexer(region)
        self.extent = self.indexer.extent
        self.linearizer = CellLinearizer(self.extent)
        self.codec = WordCodec(vocabulary)

        if self.codec.capacity < self.extent.cell_count:
            raise ConfigError(
                f"A vocabulary of {len(vocabulary)} words gives {self.codec.capacity} "
                f"{WORD_COUNT}-word identifiers, fewer than the {self.extent.cell_count} "
                f"cells in the grid"
            )

    @property
    def cell_count(self) -> int:
        return self.extent.cell_count

    @property
    def capacity(self) -> int:
        return self.codec.capacity

    def cell_to_words(self, cell: Cell) -> tuple[str, ...]:
        return self.codec.encode_words(self.linearizer.to_linear(cell))

    def words_to_cell(self, words: Sequence[str]) -> Cell:
        return self.linearizer.from_linear(self.codec.decode_words(words))

    def coords_to_words(self, lat: float, lng: float) -> tuple[str, ...]:
        """
        Encodes a coordinate as the three words naming its grid cell.

        Raises:
            OutOfBoundsError: If the coordinate is outside the region.
        """
        return self.cell_to_words(self.indexer.coord_to_cell(lat, lng))

    def words_to_coords(self, words: Sequence[str]) -> Coordinates:
        """
        Decodes three words into the center of the cell they name.

        Raises:
            UnknownWordError: If any word is not in the vocabulary.
            RangeError: If the words are valid but name an index past the
                last cell of the grid.
        """
        return self.indexer.cell_to_coord(self.words_to_cell(words))

    def describe(self) -> dict:
        """Summary of the grid and vocabulary, for display."""
        return {
            "region": {
                "min_lat": self.region.min_lat,
                "max_lat": self.region.max_lat,
                "min_lng": self.region.min_lng,
                "max_lng": self.region.max_lng,
            },
            "cell_size_meters": self.region.cell_size_meters,
            "reference_lat": self.region.reference_lat,
            "rows": self.extent.row_count,
            "columns": self.extent.column_count,
            "cells": self.cell_count,
            "vocabulary_size": len(self.vocabulary),
            "capacity": self.capacity,
        }
