import logging

import pytest

import config
from config import PlaybackConfig
from logging_setup import init_logging


@pytest.mark.parametrize(
    "raw, expected",
    [("800", 800), ("50", 200), ("99999", 2500), ("fast", 1200)],
)
def test_playback_config_from_env(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("GRAPH_VIZ_INTERVAL_MS", raw)
    assert PlaybackConfig.from_env().interval_ms == expected


def test_playback_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GRAPH_VIZ_INTERVAL_MS", raising=False)
    assert PlaybackConfig.from_env() == PlaybackConfig(interval_ms=config.DEFAULT_INTERVAL_MS)


def test_bad_env_value_is_logged(monkeypatch, caplog) -> None:
    monkeypatch.setenv("GRAPH_VIZ_INTERVAL_MS", "soon")
    with caplog.at_level(logging.WARNING, logger="config"):
        PlaybackConfig.from_env()
    assert "GRAPH_VIZ_INTERVAL_MS" in caplog.text


def test_speed_presets_are_within_bounds() -> None:
    for interval in config.SPEED_PRESETS.values():
        assert config.clamp_interval(interval) == interval


def test_init_logging_is_idempotent(monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    assert init_logging("debug") == logging.DEBUG
    assert init_logging("warning") == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING


def test_init_logging_falls_back_to_info(monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    assert init_logging("chatty") == logging.INFO


def test_init_logging_reports_through_its_module_logger(monkeypatch, caplog) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)

    with caplog.at_level(logging.DEBUG, logger="logging_setup"):
        init_logging("debug")

    names = [r.name for r in caplog.records if "Logging initialized" in r.getMessage()]
    assert names == ["logging_setup"]
