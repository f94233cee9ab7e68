# geowords/processing.py
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .converter import CoordinateWordConverter, format_words, parse_words
from .errors import InputError, InvalidRequestError, RangeError
from .logger import setup_logger
from .settings import get_converter

tqdm.pandas()

logger = setup_logger(__name__)

DIRECTIONS = ("words", "coords")


def _require_columns(df: pd.DataFrame, *columns: str):
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise InvalidRequestError(f"Column(s) not found in input: {', '.join(missing)}")


def annotate_words(
    df: pd.DataFrame,
    lat_col: str = "Latitude",
    lng_col: str = "Longitude",
    words_col: str = "words",
    converter: Optional[CoordinateWordConverter] = None,
) -> pd.DataFrame:
    """
    Adds a column with the dot-joined words for each row's coordinates.

    Rows with missing or non-numeric coordinates, or coordinates outside the
    region, get an empty value instead of failing the whole batch.
    """
    converter = converter or get_converter()
    _require_columns(df, lat_col, lng_col)

    df = df.copy()
    if df.empty:
        logger.info("No rows to convert. Returning an empty result.")
        df[words_col] = pd.Series(dtype=object)
        return df

    coords = pd.DataFrame({
        "lat": pd.to_numeric(df[lat_col], errors="coerce"),
        "lng": pd.to_numeric(df[lng_col], errors="coerce"),
    }, index=df.index)

    def safe_words(row):
        if pd.isna(row["lat"]) or pd.isna(row["lng"]):
            return None
        try:
            return format_words(converter.coords_to_words(row["lat"], row["lng"]))
        except InputError:
            return None

    logger.info(f"Converting {len(df)} coordinate pairs to words...")
    df[words_col] = coords.progress_apply(safe_words, axis=1)

    skipped = df[words_col].isna().sum()
    if skipped > 0:
        logger.warning(f"{skipped} rows had missing or out-of-region coordinates and were left empty.")
    return df


def annotate_coordinates(
    df: pd.DataFrame,
    words_col: str = "words",
    converter: Optional[CoordinateWordConverter] = None,
) -> pd.DataFrame:
    """
    Adds ``word_latitude``/``word_longitude`` columns holding the center of the
    cell each row's words name. Unusable words give NaN.
    """
    converter = converter or get_converter()
    _require_columns(df, words_col)

    def safe_coords(value):
        if not isinstance(value, (str, list, tuple)):
            return np.nan, np.nan
        try:
            coordinates = converter.words_to_coords(parse_words(value))
        except (InputError, RangeError):
            return np.nan, np.nan
        return coordinates.latitude, coordinates.longitude

    df = df.copy()
    logger.info(f"Converting {len(df)} word tuples to coordinates...")
    results = df[words_col].progress_apply(safe_coords).tolist()
    df["word_latitude"] = pd.Series([r[0] for r in results], index=df.index, dtype=float)
    df["word_longitude"] = pd.Series([r[1] for r in results], index=df.index, dtype=float)

    skipped = df["word_latitude"].isna().sum()
    if skipped > 0:
        logger.warning(f"{skipped} rows had unknown or malformed words and were left empty.")
    return df


def run_batch_pipeline(
    input_file,
    direction: str = "words",
    lat_col: str = "Latitude",
    lng_col: str = "Longitude",
    words_col: str = "words",
    converter: Optional[CoordinateWordConverter] = None,
) -> pd.DataFrame:
    """
    Reads a CSV file (path or file object) and converts every row.

    Args:
        input_file: CSV to read.
        direction: "words" to add words from coordinates, "coords" to add
            coordinates from words.

    Returns:
        The input rows with the new column(s) appended.
    """
    if direction not in DIRECTIONS:
        raise InvalidRequestError(f"direction must be one of {DIRECTIONS}, got '{direction}'")

    df = pd.read_csv(input_file)
    logger.info(f"Read {len(df)} records.")

    if direction == "words":
        return annotate_words(df, lat_col=lat_col, lng_col=lng_col,
                              words_col=words_col, converter=converter)
    return annotate_coordinates(df, words_col=words_col, converter=converter)
