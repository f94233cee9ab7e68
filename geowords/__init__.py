from .codec import WordCodec
from .converter import CoordinateWordConverter, format_words, parse_words
from .errors import (CodecOverflowError, ConfigError, GeoWordsError,
                     InputError, InternalError, InvalidRequestError,
                     OutOfBoundsError, RangeError, UnknownWordError)
from .grid import Cell, CellLinearizer, Coordinates, GridExtent, GridIndexer
from .region import INDIA_REGION, RegionConfig
from .vocabulary import VocabularyTable, generate_syllable_words, load_vocabulary
