import json
import logging

from score_store import JsonScoreStore, MemoryScoreStore


def test_memory_store():
    store = MemoryScoreStore()
    assert store.get("easy") == 0
    store.set("easy", 12)
    assert store.get("easy") == 12
    assert store.get("hard") == 0


def test_json_missing_file(tmp_path):
    assert JsonScoreStore(tmp_path / "scores.json").get("easy") == 0


def test_json_round_trip_creates_directory(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = JsonScoreStore(path)
    store.set("easy", 120)
    store.set("hard", 40)
    assert json.loads(path.read_text(encoding="utf-8")) == {"easy": 120, "hard": 40}
    assert JsonScoreStore(path).get("easy") == 120


def test_json_corrupt_file(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert JsonScoreStore(path).get("easy") == 0
    assert "Could not read scores" in caplog.text


def test_json_bad_entries(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"easy": "lots"}), encoding="utf-8")
    assert JsonScoreStore(path).get("easy") == 0
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert JsonScoreStore(path).get("easy") == 0


def test_json_reads_file_once(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"medium": 7}), encoding="utf-8")
    store = JsonScoreStore(path)
    assert store.get("medium") == 7
    path.unlink()
    assert store.get("medium") == 7
