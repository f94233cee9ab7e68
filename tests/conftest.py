import pathlib
from pathlib import Path

import pytest

from geowords.converter import CoordinateWordConverter
from geowords.region import RegionConfig
from geowords.vocabulary import VocabularyTable

TOY_WORDS = ["a", "b", "c", "d", "e"]


@pytest.fixture(scope="session")
def root_dir() -> pathlib.Path:
    return Path(__file__).parent.parent


# Keep a developer's local settings from leaking into the tests
@pytest.fixture(autouse=True)
def env(monkeypatch):
    for name in ("GEOWORDS_VOCABULARY_PATH", "GEOWORDS_VOCABULARY_SIZE", "GEOWORDS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def toy_region() -> RegionConfig:
    """A 1x1 degree region whose 11km cells form a 10x10 grid."""
    return RegionConfig(min_lat=0, max_lat=1, min_lng=0, max_lng=1, cell_size_meters=11000)


@pytest.fixture()
def toy_vocabulary() -> VocabularyTable:
    return VocabularyTable(TOY_WORDS)


@pytest.fixture()
def toy_converter(toy_region, toy_vocabulary) -> CoordinateWordConverter:
    return CoordinateWordConverter(toy_region, toy_vocabulary)


@pytest.fixture()
def toy_vocabulary_file(tmp_path) -> pathlib.Path:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(TOY_WORDS) + "\n")
    return path
