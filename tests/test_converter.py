import itertools

import pytest

from geowords.converter import CoordinateWordConverter, format_words, parse_words
from geowords.errors import (ConfigError, InvalidRequestError, OutOfBoundsError,
                             RangeError, UnknownWordError)
from geowords.grid import Cell
from geowords.region import INDIA_REGION
from geowords.vocabulary import VocabularyTable, generate_syllable_words

from .conftest import TOY_WORDS


def test_vocabulary_too_small(toy_region):
    # 4 words give 64 identifiers for 100 cells
    with pytest.raises(ConfigError, match="fewer than the 100 cells"):
        CoordinateWordConverter(toy_region, VocabularyTable(TOY_WORDS[:4]))


def test_sizes(toy_converter):
    assert toy_converter.cell_count == 100
    assert toy_converter.capacity == 125


def test_worked_example(toy_converter):
    assert toy_converter.cell_to_words(Cell(row=3, column=7)) == ("c", "c", "b")
    assert toy_converter.words_to_cell(("c", "c", "b")) == Cell(row=3, column=7)
    assert toy_converter.coords_to_words(0.35, 0.75) == ("c", "c", "b")

    coordinates = toy_converter.words_to_coords(("c", "c", "b"))
    assert coordinates.latitude == pytest.approx(0.35)
    assert coordinates.longitude == pytest.approx(0.75)


def test_round_trip_through_coordinates(toy_converter):
    decodable = 0
    for words in itertools.product(TOY_WORDS, repeat=3):
        if toy_converter.codec.decode_words(words) >= toy_converter.cell_count:
            continue
        coordinates = toy_converter.words_to_coords(words)
        assert toy_converter.coords_to_words(coordinates.latitude, coordinates.longitude) == words
        decodable += 1
    assert decodable == 100


def test_words_past_last_cell(toy_converter):
    # e.e.e is index 124, past the 100 cells of the grid
    with pytest.raises(RangeError):
        toy_converter.words_to_coords(("e", "e", "e"))


def test_unknown_word(toy_converter):
    with pytest.raises(UnknownWordError) as excinfo:
        toy_converter.words_to_coords(("a", "zebra", "b"))
    assert excinfo.value.words == ["zebra"]


def test_out_of_bounds(toy_converter):
    with pytest.raises(OutOfBoundsError):
        toy_converter.coords_to_words(1.5, 0.5)


def test_deterministic(toy_converter, toy_region):
    other = CoordinateWordConverter(toy_region, VocabularyTable(TOY_WORDS))
    for lat, lng in [(0.01, 0.02), (0.5, 0.5), (0.99, 0.11)]:
        assert toy_converter.coords_to_words(lat, lng) == toy_converter.coords_to_words(lat, lng)
        assert toy_converter.coords_to_words(lat, lng) == other.coords_to_words(lat, lng)


def test_india_round_trip():
    converter = CoordinateWordConverter(INDIA_REGION, VocabularyTable(generate_syllable_words()))

    # New Delhi
    words = converter.coords_to_words(28.6139, 77.2090)
    assert len(words) == 3
    coordinates = converter.words_to_coords(words)
    assert abs(coordinates.latitude - 28.6139) <= converter.indexer.cell_height
    assert abs(coordinates.longitude - 77.2090) <= converter.indexer.cell_width
    assert converter.coords_to_words(coordinates.latitude, coordinates.longitude) == words


def test_neighbouring_cells_get_different_words():
    converter = CoordinateWordConverter(INDIA_REGION, VocabularyTable(generate_syllable_words()))
    indexer = converter.indexer
    here = converter.coords_to_words(19.0760, 72.8777)
    north = converter.coords_to_words(19.0760 + indexer.cell_height, 72.8777)
    east = converter.coords_to_words(19.0760, 72.8777 + indexer.cell_width)
    assert len({here, north, east}) == 3


def test_describe(toy_converter):
    details = toy_converter.describe()
    assert details["rows"] == 10
    assert details["columns"] == 10
    assert details["cells"] == 100
    assert details["vocabulary_size"] == 5
    assert details["capacity"] == 125
    assert details["reference_lat"] == 0.5


@pytest.mark.parametrize("value, expected", [
    (["C", "c", "b"], ("c", "c", "b")),
    (("a", "b", "c"), ("a", "b", "c")),
    ("c.c.b", ("c", "c", "b")),
    ("C C B", ("c", "c", "b")),
    (" c, c, b ", ("c", "c", "b")),
    ("c-c-b", ("c", "c", "b")),
])
def test_parse_words(value, expected):
    assert parse_words(value) == expected


@pytest.mark.parametrize("value", [
    ["a", "b"],
    ["a", "b", "c", "d"],
    "a.b",
    "",
    ["a", "", "c"],
    ["a", 1, "c"],
    None,
    42,
])
def test_parse_words_invalid(value):
    with pytest.raises(InvalidRequestError):
        parse_words(value)


def test_format_words():
    assert format_words(("c", "c", "b")) == "c.c.b"
    assert format_words(("c", "c", "b"), " ") == "c c b"
