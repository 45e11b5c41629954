from app.config import load_settings


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "abc")
    monkeypatch.setenv("VIDSRC_CC_URL", "https://mirror.example/")
    monkeypatch.setenv("VIDROCK_NET_URL", "")
    monkeypatch.delenv("VIDSRC_ME_URL", raising=False)
    monkeypatch.delenv("VIDFAST_PRO_URL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.tmdb_api_key == "abc"
    assert settings.provider_urls == {"vidsrc.cc": "https://mirror.example/"}
    assert settings.log_level == "DEBUG"


def test_empty_api_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "")
    assert load_settings().tmdb_api_key is None


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert load_settings().log_level == "INFO"


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert load_settings().log_level == "INFO"
