import pytest

from config import DEFAULT_WATCHLIST, Settings, load_settings


def test_defaults(monkeypatch):
    for var in ("ORACLE_WATCHLIST", "ORACLE_REFRESH_INTERVAL", "COINCAP_API_KEY", "PORT"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings.watchlist == DEFAULT_WATCHLIST
    assert settings.refresh_interval_sec == 10
    assert settings.prices_api_key is None
    assert settings.port == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ORACLE_WATCHLIST", " eth, btc ,ETH,doge")
    monkeypatch.setenv("ORACLE_REFRESH_INTERVAL", "2.5")
    monkeypatch.setenv("COINCAP_API_KEY", "k")
    monkeypatch.setenv("PORT", "9000")
    settings = load_settings()
    assert settings.watchlist == ("ETH", "BTC", "DOGE")
    assert settings.refresh_interval_sec == 2.5
    assert settings.prices_api_key == "k"
    assert settings.port == 9000


def test_invalid_settings():
    with pytest.raises(ValueError):
        Settings(watchlist=(" ", ""))
    with pytest.raises(ValueError):
        Settings(refresh_interval_sec=0)
    with pytest.raises(ValueError):
        Settings(watchlist=())


def test_blank_watchlist_env_is_rejected(monkeypatch):
    monkeypatch.setenv("ORACLE_WATCHLIST", " , ")
    with pytest.raises(ValueError):
        load_settings()
