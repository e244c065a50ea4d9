from config import DEFAULT_TIMEOUT_MS, Settings, validate_settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.gemini_timeout_ms == 30000
    assert s.gemini_model == "gemini-flash-latest"
    assert s.max_upload_size_mb == 5


def test_timeout_override_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT_MS", "1500")
    assert Settings(_env_file=None).gemini_timeout_ms == 1500


def test_non_positive_timeout_uses_default(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT_MS", "0")
    assert Settings(_env_file=None).gemini_timeout_ms == DEFAULT_TIMEOUT_MS


def test_missing_api_key_is_a_warning():
    diagnostics = validate_settings(Settings(_env_file=None, gemini_api_key=""))
    assert [(d.level, d.setting) for d in diagnostics] == [("warning", "GEMINI_API_KEY")]


def test_valid_settings_have_no_diagnostics():
    assert validate_settings(Settings(_env_file=None, gemini_api_key="key")) == []


def test_bad_limits_reported():
    s = Settings(_env_file=None, gemini_api_key="key", max_concurrent_completions=-1, max_upload_size_mb=0)
    settings_named = {d.setting for d in validate_settings(s)}
    assert settings_named == {"MAX_CONCURRENT_COMPLETIONS", "MAX_UPLOAD_SIZE_MB"}
