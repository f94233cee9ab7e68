# geowords/codec.py
"""
Bijective mapping between a linear cell index and a tuple of vocabulary words.

The index is written as a fixed-width number in base V, where V is the
vocabulary size. Digit ``d0`` is the least significant and becomes the first
word, ``d2`` the most significant and the last word:

    idx = d0 + d1 * V + d2 * V**2

Decoding is plain arithmetic, so it never searches and no two indices can share
a tuple.
"""
from typing import Sequence

from .errors import CodecOverflowError, UnknownWordError
from .vocabulary import VocabularyTable

WORD_COUNT = 3


class WordCodec:
    def __init__(self, vocabulary: VocabularyTable, word_count: int = WORD_COUNT):
        self.vocabulary = vocabulary
        self.word_count = word_count
        self.base = len(vocabulary)
        self.capacity = self.base ** word_count
        """Number of distinct indices the codec can represent"""

    def encode(self, idx: int) -> tuple[int, ...]:
        """
        Split an index into its base-V digits, least significant first.

        Raises:
            CodecOverflowError: If the index is negative or needs more digits
                than the codec has.
        """
        if not 0 <= idx < self.capacity:
            raise CodecOverflowError(
                f"Index {idx} cannot be encoded in {self.word_count} base-{self.base} digits"
            )
        digits = []
        for _ in range(self.word_count):
            idx, digit = divmod(idx, self.base)
            digits.append(digit)
        return tuple(digits)

    def decode(self, digits: Sequence[int]) -> int:
        """Rebuild the index from base-V digits, least significant first."""
        if len(digits) != self.word_count:
            raise CodecOverflowError(f"Expected {self.word_count} digits, got {len(digits)}")

        idx = 0
        for digit in reversed(digits):
            if not 0 <= digit < self.base:
                raise CodecOverflowError(f"Digit {digit} is outside [0, {self.base})")
            idx = idx * self.base + digit
        return idx

    def encode_words(self, idx: int) -> tuple[str, ...]:
        return tuple(self.vocabulary.index_to_word(d) for d in self.encode(idx))

    def decode_words(self, words: Sequence[str]) -> int:
        unknown = self.vocabulary.unknown_words(words)
        if unknown:
            raise UnknownWordError(unknown)
        return self.decode([self.vocabulary.word_to_index(w) for w in words])
