import json
import logging

from tetris_highscore import HighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(str(tmp_path / "none.json")).load() == 0


def test_save_creates_folder(tmp_path):
    path = tmp_path / "nested" / "hs.json"
    store = HighScoreStore(str(path))
    store.save(420)
    assert json.loads(path.read_text()) == {"high_score": 420}
    assert store.load() == 420


def test_record_new_best(tmp_path):
    store = HighScoreStore(str(tmp_path / "hs.json"))
    store.save(100)
    result = store.record(250, lines=12, level=2)
    assert result.is_new_record
    assert result.high_score == 250
    assert (result.score, result.lines, result.level) == (250, 12, 2)
    assert store.load() == 250


def test_record_keeps_better_score(tmp_path):
    store = HighScoreStore(str(tmp_path / "hs.json"))
    store.save(1000)
    result = store.record(1000, lines=3, level=1)
    assert not result.is_new_record
    assert result.high_score == 1000
    assert store.load() == 1000


def test_corrupt_file_reads_zero(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text("not json")
    with caplog.at_level(logging.WARNING, logger="tetris.highscore"):
        assert HighScoreStore(str(path)).load() == 0
    assert "unreadable" in caplog.text


def test_invalid_value_reads_zero(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text(json.dumps({"high_score": -5}))
    assert HighScoreStore(str(path)).load() == 0
