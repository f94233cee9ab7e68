# geowords/api.py
"""
Request contracts for the coordinate/word conversions.

Each handler takes an already-decoded request body and returns a
``(status_code, body)`` pair ready to be serialized by whatever transport
calls it.
"""
from typing import Any, Optional

from .converter import CoordinateWordConverter, parse_words
from .errors import (GeoWordsError, InvalidRequestError, OutOfBoundsError,
                     RangeError, UnknownWordError)
from .logger import setup_logger
from .settings import get_converter

logger = setup_logger(__name__)

Response = tuple[int, dict]


def _error(status_code: int, error: str, message: str, **extra) -> Response:
    body = {"error": error, "message": message}
    body.update(extra)
    return status_code, body


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_words_response(
    payload: Any,
    converter: Optional[CoordinateWordConverter] = None,
) -> Response:
    """
    Handles a forward request: ``{"latitude": number, "longitude": number}``.
    """
    converter = converter or get_converter()
    logger.debug(f"Request payload: {payload}")

    if not isinstance(payload, dict):
        return _error(400, "Invalid request", "Request body must be an object.")

    latitude = payload.get("latitude")
    longitude = payload.get("longitude")
    if not (_is_number(latitude) and _is_number(longitude)):
        return _error(
            400,
            "Invalid coordinates",
            "Latitude and longitude must be numbers.",
        )

    try:
        words = converter.coords_to_words(latitude, longitude)
    except OutOfBoundsError as e:
        logger.info(f"Rejected coordinates: {e}")
        return _error(400, "Out of bounds", str(e), bound=e.bound)
    except GeoWordsError:
        logger.error(f"Failed to convert ({latitude}, {longitude}) to words", exc_info=True)
        return _error(500, "Internal server error", "Could not convert the coordinates.")

    return 200, {
        "success": True,
        "words": list(words),
        "coordinates": {"latitude": latitude, "longitude": longitude},
        "message": "Location converted to words successfully",
    }


def to_coords_response(
    payload: Any,
    converter: Optional[CoordinateWordConverter] = None,
) -> Response:
    """
    Handles a reverse request: ``{"words": [w0, w1, w2]}``.

    The words may also be sent as one delimited string. Unknown words are
    listed back under ``invalidWords``.
    """
    converter = converter or get_converter()
    logger.debug(f"Request payload: {payload}")

    if not isinstance(payload, dict):
        return _error(400, "Invalid request", "Request body must be an object.")

    try:
        words = parse_words(payload.get("words"))
    except InvalidRequestError as e:
        return _error(400, "Invalid words", str(e))

    try:
        coordinates = converter.words_to_coords(words)
    except UnknownWordError as e:
        logger.info(f"Invalid words: {e.words}, input: {list(words)}")
        return _error(
            400,
            "Unknown words",
            "Some words are not in the valid word list",
            invalidWords=e.words,
        )
    except RangeError:
        # valid words whose index lies past the last cell of the grid
        logger.info(f"Words {list(words)} do not name a cell in the region")
        return _error(404, "Location not found", "Could not find coordinates for the given words")
    except GeoWordsError:
        logger.error(f"Failed to convert {list(words)} to coordinates", exc_info=True)
        return _error(500, "Internal server error", "Could not convert the words.")

    return 200, {
        "success": True,
        "coordinates": coordinates.as_dict(),
        "words": list(words),
        "message": "Words converted to coordinates successfully",
    }
