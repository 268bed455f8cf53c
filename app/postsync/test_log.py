import json
import logging

import pytest

from postsync import config, log
from postsync.log import resolve_log_level


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "postsync.config"
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", str(path))
    monkeypatch.delenv("POSTSYNC_LOG_LEVEL", raising=False)
    return path


def test_env_level_wins_over_config_file(config_file, monkeypatch):
    config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8")
    monkeypatch.setenv("POSTSYNC_LOG_LEVEL", "debug")

    assert resolve_log_level() == logging.DEBUG


def test_unknown_env_level_falls_back_to_info(config_file, monkeypatch):
    monkeypatch.setenv("POSTSYNC_LOG_LEVEL", "chatty")

    assert resolve_log_level() == logging.INFO


def test_level_read_from_config_file(config_file):
    config_file.write_text(json.dumps({"logging": {"level": "WARNING"}}), encoding="utf-8")

    assert resolve_log_level() == logging.WARNING


def test_missing_config_file_means_info(config_file):
    assert resolve_log_level() == logging.INFO


@pytest.mark.parametrize(
    "content",
    [
        {"logging": "DEBUG"},
        {"logging": {"level": ["DEBUG"]}},
        ["logging", "DEBUG"],
        "DEBUG",
    ],
)
def test_malformed_config_means_info(config_file, content):
    config_file.write_text(json.dumps(content), encoding="utf-8")

    assert resolve_log_level() == logging.INFO


def test_configure_logging_survives_malformed_config(config_file, monkeypatch):
    config_file.write_text(json.dumps({"logging": "DEBUG"}), encoding="utf-8")
    calls = []
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kw: calls.append(kw))

    log.configure_logging()

    assert calls == [{"level": logging.INFO, "format": log.DEFAULT_LOG_FORMAT}]


def test_configure_logging_explicit_level_skips_lookup(monkeypatch):
    calls = []
    monkeypatch.setattr(log, "load_config", lambda: pytest.fail("config should not be read"))
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kw: calls.append(kw))

    log.configure_logging(logging.ERROR)

    assert calls[0]["level"] == logging.ERROR
