"""Tests for the command-line interface."""

import json

import pytest

from yelplex.cli import main


@pytest.fixture
def review_file(write_jsonl):
    return write_jsonl([
        {"review_id": "r1", "business_id": "b1", "stars": 5, "text": "The food was great", "useful": 2},
        {"review_id": "r2", "business_id": "b2", "stars": 2, "text": "Bad service, bad coffee"},
        {"review_id": "r3", "business_id": "b2", "stars": 4, "text": "Good and great"},
    ])


def _resources(lexicon_file, stopwords_file):
    return ["--lexicon", str(lexicon_file), "--stopwords", str(stopwords_file)]


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_tokens_command(capsys, lexicon_file, stopwords_file):
    main(["tokens", "The food was great"] + _resources(lexicon_file, stopwords_file))
    out = capsys.readouterr().out
    assert "Tokens (2): food great" in out
    assert "great=+3" in out
    assert "Sentiment: +3.000" in out


def test_tokens_command_without_matches(capsys, lexicon_file, stopwords_file):
    main(["tokens", "the the was"] + _resources(lexicon_file, stopwords_file))
    assert "Scored (0)" in capsys.readouterr().out


def test_analyze_command(tmp_path, capsys, review_file, lexicon_file, stopwords_file):
    out_file = tmp_path / "out.json"
    csv_dir = tmp_path / "tables"
    main([
        "analyze", str(review_file),
        "--min-reviews", "1", "--min-businesses", "1",
        "--out", str(out_file), "--csv-dir", str(csv_dir),
    ] + _resources(lexicon_file, stopwords_file))

    out = capsys.readouterr().out
    assert "Loaded 3 reviews" in out
    assert "Lexicon coverage" in out
    assert "Most positive words" in out

    data = json.loads(out_file.read_text(encoding="utf-8"))
    sentiment = {r["review_id"]: r["sentiment"] for r in data["review_sentiment"]}
    assert sentiment == {"r1": 3.0, "r2": -3.0, "r3": 3.0}
    assert data["thresholds"] == {"min_reviews": 1, "min_businesses": 1}
    assert (csv_dir / "review_sentiment.csv").exists()


def test_analyze_limit(capsys, review_file, lexicon_file, stopwords_file):
    main(["analyze", str(review_file), "--limit", "1"] + _resources(lexicon_file, stopwords_file))
    assert "Loaded 1 reviews" in capsys.readouterr().out


def test_analyze_malformed_file_exits(write_jsonl, lexicon_file, stopwords_file):
    path = write_jsonl([{"review_id": "r1", "business_id": "b1", "stars": 5, "text": "ok"}, "{broken"])
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(path)] + _resources(lexicon_file, stopwords_file))
    assert exc.value.code == 1


def test_analyze_missing_lexicon_exits(tmp_path, review_file, stopwords_file):
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(review_file), "--lexicon", str(tmp_path / "none.tsv"),
              "--stopwords", str(stopwords_file)])
    assert exc.value.code == 1


def test_export_writes_tables_from_result(tmp_path, capsys, review_file, lexicon_file, stopwords_file):
    out_file = tmp_path / "out.json"
    main(["analyze", str(review_file), "--min-reviews", "1", "--min-businesses", "1",
          "--out", str(out_file)] + _resources(lexicon_file, stopwords_file))
    capsys.readouterr()

    csv_dir = tmp_path / "from_export"
    main(["export", "--in", str(out_file), "--csv-dir", str(csv_dir)])

    assert "review_sentiment: 3 rows" in capsys.readouterr().out
    lines = (csv_dir / "review_sentiment.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "review_id,stars,sentiment"
    assert len(lines) == 4
    assert (csv_dir / "word_lexicon.csv").exists()


def test_export_rejects_other_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"coverage": {"tokens": 4}}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["export", "--in", str(path), "--csv-dir", str(tmp_path / "tables")])
    assert exc.value.code == 1
    assert not (tmp_path / "tables").exists()


def test_export_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["export", "--in", str(tmp_path / "missing.json"), "--csv-dir", str(tmp_path / "t")])
    assert exc.value.code == 1


def test_analyze_bad_encoding_exits(tmp_path, lexicon_file, stopwords_file):
    path = tmp_path / "reviews.json"
    path.write_bytes(b'{"review_id": "r1", "business_id": "b1", "stars": 5, "text": "\xff"}\n')
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(path)] + _resources(lexicon_file, stopwords_file))
    assert exc.value.code == 1
