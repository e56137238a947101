"""Tests for lexicon and stop-word resources."""

import pytest

from yelplex.core import lexicon as lexicon_module
from yelplex.core.exceptions import ResourceError
from yelplex.core.lexicon import load_lexicon, load_stop_words


class TestLoadLexicon:
    """Tests for load_lexicon."""

    def test_default_is_afinn(self):
        lexicon = load_lexicon()
        assert lexicon["great"] == 3
        assert lexicon["bad"] == -3
        assert all(-5 <= score <= 5 for score in lexicon.values())

    def test_from_file(self, lexicon_file):
        lexicon = load_lexicon(str(lexicon_file))
        assert dict(lexicon) == {"great": 3, "good": 3, "bad": -3, "awful": -3}

    def test_is_read_only(self, lexicon_file):
        lexicon = load_lexicon(str(lexicon_file))
        with pytest.raises(TypeError):
            lexicon["great"] = 5

    def test_phrases_and_apostrophes(self, tmp_path):
        path = tmp_path / "lex.tsv"
        path.write_text("can't stand\t-3\ndon't like\t-2\nwow\t4\n", encoding="utf-8")
        lexicon = load_lexicon(str(path))
        assert lexicon["can't stand"] == -3
        assert lexicon["wow"] == 4

    @pytest.mark.parametrize("content", [
        "great\t7\n",
        "great\t-6\n",
        "great\t2.5\n",
        "great\tinf\n",
        "great\tvery\n",
        "great\n",
        "great\t3\ngreat\t2\n",
    ])
    def test_invalid_files(self, tmp_path, content):
        path = tmp_path / "lex.tsv"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ResourceError):
            load_lexicon(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "lex.tsv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ResourceError):
            load_lexicon(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceError) as exc:
            load_lexicon(str(tmp_path / "missing.tsv"))
        assert "missing.tsv" in str(exc.value)

    def test_unknown_language(self):
        with pytest.raises(ResourceError):
            load_lexicon(language="xx")


class TestLoadStopWords:
    """Tests for load_stop_words."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "stop.txt"
        path.write_text("The\nwas\n\n  and  \n", encoding="utf-8")
        assert load_stop_words(str(path)) == frozenset({"the", "was", "and"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceError) as exc:
            load_stop_words(str(tmp_path / "missing.txt"))
        assert "missing.txt" in str(exc.value)

    def test_missing_nltk_corpus(self, monkeypatch):
        class MissingCorpus:
            def words(self, language):
                raise LookupError("Resource stopwords not found.")

        monkeypatch.setattr(lexicon_module, "stopwords", MissingCorpus())
        with pytest.raises(ResourceError) as exc:
            load_stop_words()
        assert "nltk.download" in str(exc.value)

    def test_nltk_corpus(self, monkeypatch):
        class FakeCorpus:
            def words(self, language):
                assert language == "english"
                return ["the", "was", "And"]

        monkeypatch.setattr(lexicon_module, "stopwords", FakeCorpus())
        assert load_stop_words() == frozenset({"the", "was", "and"})
