# geowords/settings.py
import logging
import os
from functools import cache
from typing import Optional

from dotenv import load_dotenv

from .converter import CoordinateWordConverter
from .errors import ConfigError
from .logger import setup_logger
from .region import INDIA_REGION, RegionConfig
from .vocabulary import (DEFAULT_VOCABULARY_SIZE, VocabularyTable,
                         generate_syllable_words, load_vocabulary)

# Load environment variables from .env file for local development
load_dotenv()


def get_log_level() -> str:
    """Logging level name from GEOWORDS_LOG_LEVEL, checked against the levels logging knows."""
    raw = os.getenv("GEOWORDS_LOG_LEVEL", "INFO")
    level = raw.strip().upper()
    # getLevelName returns the numeric level only for registered names
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"GEOWORDS_LOG_LEVEL must be a logging level such as INFO or DEBUG, got '{raw}'")
    return level


# --- Configuration ---
LOG_LEVEL = get_log_level()

logger = setup_logger(__name__, LOG_LEVEL)


def get_vocabulary_size() -> int:
    """Size of the generated vocabulary, from GEOWORDS_VOCABULARY_SIZE."""
    raw = os.getenv("GEOWORDS_VOCABULARY_SIZE", str(DEFAULT_VOCABULARY_SIZE))
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"GEOWORDS_VOCABULARY_SIZE must be an integer, got '{raw}'") from None


def build_vocabulary(path: Optional[str] = None) -> VocabularyTable:
    """
    Load the vocabulary from `path`, GEOWORDS_VOCABULARY_PATH, or fall back to
    the generated syllable list.
    """
    path = path or os.getenv("GEOWORDS_VOCABULARY_PATH")
    if path:
        logger.info(f"Loading vocabulary from {path}")
        return load_vocabulary(path)

    size = get_vocabulary_size()
    logger.info(f"Using generated vocabulary of {size} words")
    return VocabularyTable(generate_syllable_words(size))


def build_converter(
    region: RegionConfig = INDIA_REGION,
    vocabulary_path: Optional[str] = None,
) -> CoordinateWordConverter:
    """
    Build a converter for `region`. Any ConfigError is fatal and should stop
    the process rather than be retried.
    """
    vocabulary = build_vocabulary(vocabulary_path)
    converter = CoordinateWordConverter(region, vocabulary)
    logger.info(
        f"Grid ready: {converter.extent.row_count} rows x {converter.extent.column_count} "
        f"columns ({converter.cell_count} cells), {len(vocabulary)} words "
        f"({converter.capacity} identifiers)"
    )
    return converter


@cache
def get_converter() -> CoordinateWordConverter:
    """The default converter, built on first use and shared afterwards."""
    return build_converter()
