"""Shared fixtures for yelplex tests."""

import json
from types import MappingProxyType

import pytest

from yelplex.core.models import Review


@pytest.fixture
def lexicon():
    return MappingProxyType({"great": 3, "good": 3, "love": 3, "bad": -3, "awful": -3, "ok": 1})


@pytest.fixture
def stop_words():
    return frozenset({"the", "was", "and", "a", "it", "is", "i", "this"})


@pytest.fixture
def reviews():
    return [
        Review("r1", "b1", 5, "The food was great"),
        Review("r2", "b2", 4, "Great service and good coffee, great view"),
        Review("r3", "b1", 1, "Awful. The soup was bad and the bread was bad"),
        Review("r4", "b3", 3, "The the was"),
    ]


@pytest.fixture
def write_jsonl(tmp_path):
    """Write records (dicts or raw strings) as a newline-delimited JSON file."""
    def _write(records, name="reviews.json"):
        path = tmp_path / name
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lexicon.tsv"
    path.write_text("great\t3\ngood\t3\nbad\t-3\nawful\t-3\n", encoding="utf-8")
    return path


@pytest.fixture
def stopwords_file(tmp_path):
    path = tmp_path / "stopwords.txt"
    path.write_text("the\nwas\nand\na\n", encoding="utf-8")
    return path
