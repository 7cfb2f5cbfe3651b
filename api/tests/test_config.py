import pytest

from nodues.config import DEFAULT_MOCK_LATENCY, StoreSettings, store_settings
from nodues.db import make_engine


def test_store_settings_default_to_mock(monkeypatch):
    monkeypatch.delenv("NODUES_STORE_URL", raising=False)
    monkeypatch.delenv("NODUES_STORE_KEY", raising=False)
    monkeypatch.delenv("NODUES_MOCK_LATENCY", raising=False)
    settings = store_settings()
    assert settings.remote_enabled is False
    assert settings.mock_latency == DEFAULT_MOCK_LATENCY


@pytest.mark.parametrize(
    "url,key,expected",
    [
        ("postgresql://db.example.com/nodues", "secret", True),
        ("postgresql://db.example.com/nodues", "", False),
        ("", "secret", False),
        ("   ", "secret", False),
    ],
)
def test_store_settings_need_url_and_key(monkeypatch, url, key, expected):
    monkeypatch.setenv("NODUES_STORE_URL", url)
    monkeypatch.setenv("NODUES_STORE_KEY", key)
    assert store_settings().remote_enabled is expected


def test_store_settings_read_mock_latency(monkeypatch):
    monkeypatch.setenv("NODUES_MOCK_LATENCY", "0.1")
    assert store_settings().mock_latency == 0.1


def test_remote_enabled_requires_both_values():
    assert StoreSettings(url="sqlite:///x.db", key="k").remote_enabled
    assert not StoreSettings(url="sqlite:///x.db").remote_enabled


def test_make_engine_sqlite_ignores_key(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'store.db'}", "secret")
    assert engine.url.password is None
    assert engine.url.database.endswith("store.db")
