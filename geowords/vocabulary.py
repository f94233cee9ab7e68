# geowords/vocabulary.py
import itertools
import json
import pathlib
from typing import Iterable, Iterator, Union

import yaml

from .errors import ConfigError, RangeError, UnknownWordError

CONSONANTS = "bdfgklmnprstvz"
VOWELS = "aeiou"
# Every consonant-vowel pair, e.g. "ba", "be", ... "zu"
SYLLABLES = [c + v for c in CONSONANTS for v in VOWELS]

DEFAULT_VOCABULARY_SIZE = 16384


def normalize_word(word: str) -> str:
    return word.strip().lower()


def generate_syllable_words(count: int = DEFAULT_VOCABULARY_SIZE) -> list[str]:
    """
    Build a deterministic list of pronounceable six-letter words.

    Words are three consonant-vowel syllables taken in a fixed order
    ("bababa", "bababe", ...), so the same count always yields the same list.
    """
    capacity = len(SYLLABLES) ** 3
    if not 0 < count <= capacity:
        raise ConfigError(f"Generated vocabulary size must be within 1-{capacity}, got {count}")
    combos = itertools.product(SYLLABLES, repeat=3)
    return ["".join(parts) for parts in itertools.islice(combos, count)]


class VocabularyTable:
    """
    Immutable, ordered word list with constant-time lookups in both directions.

    A word's position is its digit value in the word codec, so the order of the
    source list must never change once identifiers have been handed out.
    """

    def __init__(self, words: Iterable[str]):
        ordered = []
        word_to_index = {}
        for position, word in enumerate(words):
            if not isinstance(word, str):
                raise ConfigError(f"Vocabulary entry {position} is not a string: {word!r}")
            normalized = normalize_word(word)
            if not normalized:
                raise ConfigError(f"Vocabulary entry {position} is blank")
            if normalized in word_to_index:
                raise ConfigError(
                    f"Duplicate vocabulary word '{normalized}' at positions "
                    f"{word_to_index[normalized]} and {position}"
                )
            word_to_index[normalized] = position
            ordered.append(normalized)

        if not ordered:
            raise ConfigError("Vocabulary must contain at least one word")

        self._words = tuple(ordered)
        self._word_to_index = word_to_index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._word_to_index

    def word_to_index(self, word: str) -> int:
        try:
            return self._word_to_index[normalize_word(word)]
        except KeyError:
            raise UnknownWordError([word]) from None

    def index_to_word(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise RangeError(f"Vocabulary index {index} is outside [0, {len(self._words)})", index)
        return self._words[index]

    def unknown_words(self, words: Iterable[str]) -> list[str]:
        """Return the words not in the vocabulary, in their original order."""
        return [word for word in words if word not in self]


def load_vocabulary(path: Union[str, pathlib.Path]) -> VocabularyTable:
    """
    Load a vocabulary file.

    Args:
        path: A ``.txt`` file with one word per line (blank lines and ``#``
            comments are skipped), or a ``.json``/``.yaml``/``.yml`` file holding
            a list of words or a mapping with a ``words`` list.

    Returns:
        The VocabularyTable in file order.

    Raises:
        ConfigError: If the file is missing, unparsable or holds an invalid list.
    """
    path = pathlib.Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() == '.txt':
                words = [
                    line.strip() for line in f
                    if line.strip() and not line.lstrip().startswith('#')
                ]
            elif path.suffix.lower() == '.json':
                data = json.load(f)
                words = data.get('words') if isinstance(data, dict) else data
            else:
                # BaseLoader keeps every scalar a string, so "yes" or "null" stay words
                data = yaml.load(f, Loader=yaml.BaseLoader)
                words = data.get('words') if isinstance(data, dict) else data
    except FileNotFoundError:
        raise ConfigError(f"Vocabulary file not found at {path}") from None
    except (OSError, ValueError, yaml.YAMLError) as e:
        # ValueError covers json.JSONDecodeError and UnicodeDecodeError
        raise ConfigError(f"Could not read or parse vocabulary file {path}. Error: {e}") from e

    if not isinstance(words, list):
        raise ConfigError(f"Vocabulary file {path} must contain a list of words")

    return VocabularyTable(words)
