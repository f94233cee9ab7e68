import pytest

from geowords.api import to_coords_response, to_words_response
from geowords.errors import CodecOverflowError


def test_to_words(toy_converter):
    status, body = to_words_response({"latitude": 0.35, "longitude": 0.75}, toy_converter)
    assert status == 200
    assert body["success"] is True
    assert body["words"] == ["c", "c", "b"]
    assert body["coordinates"] == {"latitude": 0.35, "longitude": 0.75}


def test_to_words_accepts_integers(toy_converter):
    status, body = to_words_response({"latitude": 0, "longitude": 0}, toy_converter)
    assert status == 200
    assert body["words"] == ["a", "a", "a"]


@pytest.mark.parametrize("payload", [
    {"latitude": "0.35", "longitude": 0.75},
    {"latitude": 0.35},
    {"latitude": True, "longitude": 0.75},
    {"latitude": None, "longitude": None},
])
def test_to_words_invalid_coordinates(toy_converter, payload):
    status, body = to_words_response(payload, toy_converter)
    assert status == 400
    assert body["error"] == "Invalid coordinates"


def test_to_words_not_an_object(toy_converter):
    status, body = to_words_response(["0.35", "0.75"], toy_converter)
    assert status == 400
    assert body["error"] == "Invalid request"


def test_to_words_out_of_bounds(toy_converter):
    status, body = to_words_response({"latitude": 0.5, "longitude": 1.0}, toy_converter)
    assert status == 400
    assert body["error"] == "Out of bounds"
    assert body["bound"] == "max_lng"
    assert "max_lng" in body["message"]


def test_to_words_internal_error(toy_converter, monkeypatch):
    def broken(lat, lng):
        raise CodecOverflowError("index too large")

    monkeypatch.setattr(toy_converter, "coords_to_words", broken)
    status, body = to_words_response({"latitude": 0.5, "longitude": 0.5}, toy_converter)
    assert status == 500
    assert body["error"] == "Internal server error"
    assert "index too large" not in body["message"]


def test_to_coords(toy_converter):
    status, body = to_coords_response({"words": ["C", "c", "B"]}, toy_converter)
    assert status == 200
    assert body["success"] is True
    assert body["words"] == ["c", "c", "b"]
    assert body["coordinates"]["latitude"] == pytest.approx(0.35)
    assert body["coordinates"]["longitude"] == pytest.approx(0.75)


def test_to_coords_from_string(toy_converter):
    status, body = to_coords_response({"words": "c.c.b"}, toy_converter)
    assert status == 200
    assert body["words"] == ["c", "c", "b"]


@pytest.mark.parametrize("payload", [
    {"words": ["a", "b"]},
    {"words": ["a", "b", "c", "d"]},
    {"words": 7},
    {},
])
def test_to_coords_invalid_words(toy_converter, payload):
    status, body = to_coords_response(payload, toy_converter)
    assert status == 400
    assert body["error"] == "Invalid words"


def test_to_coords_unknown_words(toy_converter):
    status, body = to_coords_response({"words": ["a", "zebra", "yak"]}, toy_converter)
    assert status == 400
    assert body["error"] == "Unknown words"
    assert body["invalidWords"] == ["zebra", "yak"]


def test_to_coords_location_not_found(toy_converter):
    status, body = to_coords_response({"words": ["e", "e", "e"]}, toy_converter)
    assert status == 404
    assert body["error"] == "Location not found"


def test_round_trip_through_responses(toy_converter):
    _, forward = to_words_response({"latitude": 0.61, "longitude": 0.27}, toy_converter)
    _, reverse = to_coords_response({"words": forward["words"]}, toy_converter)
    _, again = to_words_response(reverse["coordinates"], toy_converter)
    assert again["words"] == forward["words"]
