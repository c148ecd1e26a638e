# tests/test_config.py
# JSON config, metrics tracker and logging helpers

import json
import logging

import pytest

from trie_autocompleter.utils.config_manager import DEFAULTS, Config
from trie_autocompleter.utils.logger_utils import ROOT_LOGGER, configure_logging, time_block
from trie_autocompleter.utils.metrics_tracker import Metrics


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg["not_found_message"] == "No words found"


def test_missing_file_keeps_defaults(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert cfg["max_word_length"] == 50
    assert not p.exists()


def test_file_overrides(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_word_length": 10, "bogus": 1}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg["max_word_length"] == 10
    assert cfg.get("bogus") is None


def test_corrupt_file_keeps_defaults(tmp_path, caplog):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(p))
    assert cfg.data == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("max_word_length", "12")
    cfg.set("color", "no")
    assert cfg["max_word_length"] == 12
    assert cfg["color"] is False
    assert json.loads(p.read_text(encoding="utf8"))["max_word_length"] == 12


def test_set_without_persist(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("log_level", "DEBUG", persist=False)
    assert cfg["log_level"] == "DEBUG"
    assert not p.exists()


def test_set_unknown_key():
    with pytest.raises(KeyError):
        Config().set("nope", 1)


def test_metrics_average_and_persistence(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(str(p))
    m.record("INSERT", 0.5)
    m.record("INSERT", 1.5)
    assert m.avg("INSERT") == pytest.approx(1.0)
    assert m.avg("REMOVE") == 0.0
    m.save()

    again = Metrics(str(p))
    assert again.count("INSERT") == 2
    assert again.avg("INSERT") == pytest.approx(1.0)


def test_metrics_table_rows():
    m = Metrics()
    m.record("EXIT", 0.001)
    assert m.table().row_count == 1


def test_time_block_records():
    m = Metrics()
    with time_block("LOAD", m):
        pass
    assert m.count("LOAD") == 1


def test_configure_logging_file(tmp_path):
    log_file = tmp_path / "run.log"
    logger = configure_logging("info", str(log_file), use_color=False)
    logging.getLogger(ROOT_LOGGER + ".core.engine").info("loaded 3 word(s)")
    for h in logger.handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "INFO" in text and "loaded 3 word(s)" in text
    configure_logging("WARNING")
