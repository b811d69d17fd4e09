from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the netflex package importable when running the tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netflex.core import config as core_config  # noqa: E402
from netflex.core.latency import Latency  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "STORAGE_BACKEND", "DATA_FILE", "LATENCY_SCALE", "GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)

    settings = core_config.get_settings()

    assert settings.app_env == "dev"
    assert settings.storage_backend == "json"
    assert settings.data_file == core_config.DEFAULT_DATA_FILE
    assert settings.latency_scale == 1.0
    assert settings.gemini_api_key == ""
    assert settings.gemini_model == "gemini-2.5-flash"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_BACKEND", " SQL ")
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "x.json"))
    monkeypatch.setenv("LATENCY_SCALE", "0")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "legacy-key")

    settings = core_config.get_settings()

    assert settings.storage_backend == "sql"
    assert settings.data_file == tmp_path / "x.json"
    assert settings.latency_scale == 0.0
    assert settings.gemini_api_key == "legacy-key"


@pytest.mark.parametrize("raw,expected", [("0.25", 0.25), ("-3", 0.0), ("fast", 1.0)])
def test_latency_scale_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("LATENCY_SCALE", raw)
    assert core_config.get_settings().latency_scale == expected
    assert Latency.from_settings().scale == expected


def test_latency_delays():
    latency = Latency()
    assert latency.seconds_for("list") == pytest.approx(0.5)
    assert latency.seconds_for("get") == pytest.approx(0.3)
    assert latency.seconds_for("create") == pytest.approx(0.8)
    assert latency.seconds_for("delete") == pytest.approx(0.6)
    assert latency.seconds_for("unknown") == 0.0
    assert Latency(scale=0.1).seconds_for("login") == pytest.approx(0.08)
    assert Latency.disabled().seconds_for("update") == 0.0


def test_configure_logging_accepts_level_names(monkeypatch):
    from netflex.core.logs import configure_logging

    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging()
    configure_logging("warning")
    configure_logging("not-a-level")
